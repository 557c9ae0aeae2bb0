"""SofaClean Pro marketing site and CMS backend."""
