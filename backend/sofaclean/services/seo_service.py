"""SEO metadata and schema.org JSON-LD builders for the public pages."""

import re
from typing import Any, Dict, List
from urllib.parse import quote

from sofaclean.config import settings
from sofaclean.models.post import Post
from sofaclean.schemas.page import PageMeta
from sofaclean.schemas.site import ContactSettings

ALTERNATE_LANGUAGE_TAGS = {"en": "en-US", "th": "th-TH"}

ORGANIZATION_ADDRESS = {
    "@type": "PostalAddress",
    "streetAddress": "123 Sukhumvit Road",
    "addressLocality": "Bangkok",
    "postalCode": "10110",
    "addressCountry": "TH",
}


def encode_slug(slug: str) -> str:
    return quote(slug or "", safe="")


def page_url(lang: str, path: str = "") -> str:
    return f"{settings.site_url()}/{lang}{path}"


def post_path(slug: str) -> str:
    return f"/blog/{encode_slug(slug)}"


def build_page_meta(lang: str, path: str, title: str, description: str) -> PageMeta:
    return PageMeta(
        title=title,
        description=description,
        canonical=page_url(lang, path),
        alternates={
            tag: page_url(locale, path)
            for locale, tag in ALTERNATE_LANGUAGE_TAGS.items()
        },
    )


def build_post_meta(lang: str, post: Post) -> PageMeta:
    meta_title = post.meta_title or post.title
    meta_description = post.meta_description or post.description
    return build_page_meta(
        lang,
        post_path(post.slug),
        f"{meta_title} | {settings.SITE_NAME}",
        meta_description,
    )


def international_phone(phone: str) -> str:
    """``0812345678`` -> ``+66-812345678``."""
    digits = re.sub(r"[\s-]", "", phone or "")
    return f"+{re.sub(r'^0', '66-', digits)}"


def organization_schema(contact: ContactSettings, description: str) -> Dict[str, Any]:
    site_url = settings.site_url()
    return {
        "@context": "https://schema.org",
        "@type": "Organization",
        "name": settings.SITE_NAME,
        "url": site_url,
        "logo": f"{site_url}/logo.png",
        "contactPoint": {
            "@type": "ContactPoint",
            "telephone": international_phone(contact.phone),
            "contactType": "Customer Service",
        },
        "address": dict(ORGANIZATION_ADDRESS),
        "description": description,
        "sameAs": [contact.facebook_url, contact.line_url],
    }


def faq_schema(faq_items: List[Dict[str, str]]) -> Dict[str, Any]:
    return {
        "@context": "https://schema.org",
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": item.get("question", ""),
                "acceptedAnswer": {"@type": "Answer", "text": item.get("answer", "")},
            }
            for item in faq_items
        ],
    }


def article_schema(lang: str, post: Post) -> Dict[str, Any]:
    site_url = settings.site_url()
    return {
        "@context": "https://schema.org",
        "@type": "Article",
        "mainEntityOfPage": {
            "@type": "WebPage",
            "@id": page_url(lang, post_path(post.slug)),
        },
        "headline": post.title,
        "description": post.description,
        "image": post.image,
        "author": {"@type": "Organization", "name": settings.SITE_NAME},
        "publisher": {
            "@type": "Organization",
            "name": settings.SITE_NAME,
            "logo": {"@type": "ImageObject", "url": f"{site_url}/logo.png"},
        },
        "datePublished": post.date,
        "inLanguage": lang,
    }
