"""Seed the database with an admin account, sample posts and site documents."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import argparse

from sofaclean.config import content_defaults
from sofaclean.database import SessionLocal, engine, Base
import sofaclean.models  # noqa: F401

from sofaclean.models.admin_user import AdminUser
from sofaclean.models.post import Post
from sofaclean.models.site_document import SiteDocument
from sofaclean.services.auth_service import hash_password

SAMPLE_POSTS = [
    {
        "title": "How to Clean a Fabric Sofa at Home",
        "slug": "how-to-clean-fabric-sofa",
        "image_hint": "fabric sofa",
        "date": "2024-07-21",
        "category": "Sofa Care",
        "description": "A step-by-step guide to keeping your fabric sofa fresh between professional cleanings.",
        "content": "<p>Vacuum weekly, blot spills immediately, and book a deep clean every 6-12 months.</p>",
        "status": "published",
    },
    {
        "title": "When Should You Clean Your Car Seats?",
        "slug": "when-to-clean-car-seats",
        "image_hint": "car seats",
        "date": "2024-07-18",
        "category": "Car Care",
        "description": "Signs that your car seats need a professional clean.",
        "content": "<p>Odors, visible stains and allergies are all signs it's time for a deep clean.</p>",
        "status": "published",
    },
    {
        "title": "บริการซักเบาะโซฟา ทำความสะอาดถึงบ้าน สะอาด ปลอดภัย เหมือนใหม่",
        "slug": "บริการซักเบาะโซฟา-ทำความสะอาดถึงบ้าน-สะอาด-ปลอดภัย-เหมือนใหม่",
        "image_hint": "sofa cleaning",
        "date": "2025-08-13",
        "category": "บริการ",
        "description": "บริการซักโซฟาถึงบ้านโดยทีมงานมืออาชีพ",
        "content": "<p>เราใช้น้ำยาที่ปลอดภัยและเครื่องมือระดับมืออาชีพ</p>",
        "status": "published",
    },
]


def seed(admin_email: str, admin_password: str):
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(AdminUser).count() > 0:
            print("Database already seeded. Skipping.")
            return

        admin = AdminUser(
            email=admin_email.strip().lower(),
            display_name="Admin",
            password_hash=hash_password(admin_password),
        )
        db.add(admin)

        for item in SAMPLE_POSTS:
            db.add(Post(image=content_defaults.post_image_url, meta_title="", meta_description="", **item))

        db.add(SiteDocument(collection="pages", doc_key="home", data=dict(content_defaults.home)))
        db.add(SiteDocument(collection="settings", doc_key="contact", data=dict(content_defaults.contact)))
        db.commit()

        print("Seed data created successfully!")
        print(f"  Posts: {len(SAMPLE_POSTS)}")
        print(f"  Admin login: {admin.email}")

    except Exception as e:
        db.rollback()
        raise e
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--email", default="admin@sofaclean.local")
    parser.add_argument("--password", default="change-me")
    args = parser.parse_args()
    seed(args.email, args.password)
