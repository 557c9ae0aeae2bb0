"""Public page payloads: home, blog index, blog post, and the sitemap feed."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.orm import Session

from sofaclean.config import ContentDefaults, get_content_defaults
from sofaclean.database import get_db
from sofaclean.schemas.page import BlogIndexPageOut, BlogPostPageOut, HomePageOut
from sofaclean.schemas.post import PostOut, PostSummaryOut
from sofaclean.services import content_service, seo_service, sitemap_service
from sofaclean.services.dictionary_service import get_dictionary, is_supported_locale

router = APIRouter(tags=["pages"])

THAI_MONTHS = (
    "มกราคม", "กุมภาพันธ์", "มีนาคม", "เมษายน", "พฤษภาคม", "มิถุนายน",
    "กรกฎาคม", "สิงหาคม", "กันยายน", "ตุลาคม", "พฤศจิกายน", "ธันวาคม",
)
ENGLISH_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _validate_lang(lang: str) -> str:
    if not is_supported_locale(lang):
        raise HTTPException(status_code=404, detail="Page not found")
    return lang


def format_published_on(value: str, lang: str) -> str | None:
    try:
        parsed = date.fromisoformat((value or "")[:10])
    except ValueError:
        return None
    if lang == "th":
        # Thai long dates use the Buddhist era.
        return f"{parsed.day} {THAI_MONTHS[parsed.month - 1]} {parsed.year + 543}"
    return f"{ENGLISH_MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"


@router.get("/sitemap.xml", include_in_schema=False)
def sitemap():
    xml = sitemap_service.render_sitemap_xml(sitemap_service.build_entries())
    return Response(content=xml, media_type="application/xml")


@router.get("/{lang}", response_model=HomePageOut)
def home_page(
    lang: str,
    db: Session = Depends(get_db),
    defaults: ContentDefaults = Depends(get_content_defaults),
):
    _validate_lang(lang)
    dictionary = get_dictionary(lang)
    recent_posts = content_service.get_recent_posts(db)
    home = content_service.get_home_page_data(db, defaults)
    contact = content_service.get_contact_settings(db, defaults)

    metadata = dictionary["metadata"]
    thai_description = get_dictionary("th")["metadata"]["description"]
    return HomePageOut(
        lang=lang,
        meta=seo_service.build_page_meta(lang, "", metadata["title"], metadata["description"]),
        json_ld=[
            seo_service.organization_schema(contact, thai_description),
            seo_service.faq_schema(dictionary.get("faqData", [])),
        ],
        recent_posts=[PostSummaryOut.model_validate(row) for row in recent_posts],
        home=home,
        contact=contact,
        dictionary=dictionary,
    )


@router.get("/{lang}/blog", response_model=BlogIndexPageOut)
def blog_index_page(lang: str, db: Session = Depends(get_db)):
    _validate_lang(lang)
    dictionary = get_dictionary(lang)
    blog_index = dictionary["blogIndex"]
    posts = content_service.get_posts(db)
    return BlogIndexPageOut(
        lang=lang,
        meta=seo_service.build_page_meta(lang, "/blog", blog_index["title"], blog_index["description"]),
        posts=[PostSummaryOut.model_validate(row) for row in posts],
        dictionary=dictionary,
    )


@router.get("/{lang}/blog/{slug}", response_model=BlogPostPageOut)
def blog_post_page(lang: str, slug: str, db: Session = Depends(get_db)):
    _validate_lang(lang)
    post = content_service.get_post(db, slug)
    if not post:
        raise HTTPException(status_code=404, detail="ไม่พบบทความ")

    related = content_service.get_related_posts(db, post.post_id)
    return BlogPostPageOut(
        lang=lang,
        meta=seo_service.build_post_meta(lang, post),
        json_ld=[seo_service.article_schema(lang, post)],
        post=PostOut.model_validate(post),
        related_posts=[PostSummaryOut.model_validate(row) for row in related],
        published_on=format_published_on(post.date, lang),
        dictionary=get_dictionary(lang),
    )
