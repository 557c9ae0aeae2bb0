"""Quote intake flow: collect lead details, attach photos, submit one quote row.

State machine::

    idle -> collecting -> submitting -> idle        (success, fields reset)
                                     -> collecting  (failure, fields kept)

Validation happens before anything touches the database, so a rejected
submission leaves no rows behind.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sofaclean.config import settings
from sofaclean.models.quote import Quote
from sofaclean.schemas.quote import GeocodeOut
from sofaclean.services import image_service

logger = logging.getLogger(__name__)


class IntakeState(str, Enum):
    IDLE = "idle"
    COLLECTING = "collecting"
    SUBMITTING = "submitting"


class QuoteValidationError(ValueError):
    pass


class QuoteSubmissionError(RuntimeError):
    pass


@dataclass
class ImageAttachment:
    filename: str
    content: bytes
    content_type: Optional[str] = None


class QuoteIntake:
    def __init__(
        self,
        max_images: int | None = None,
        encoder: Callable[[bytes, Optional[str]], str] = image_service.compress_to_data_uri,
    ):
        self.max_images = max_images or settings.QUOTE_MAX_IMAGES
        self.encoder = encoder
        self.state = IntakeState.IDLE
        self.last_error: Optional[str] = None
        self.warning: Optional[str] = None
        self._clear_fields()

    def _clear_fields(self):
        self.name = ""
        self.phone = ""
        self.address = ""
        self.description = ""
        self.images: List[ImageAttachment] = []

    def open(self) -> "QuoteIntake":
        if self.state == IntakeState.IDLE:
            self.state = IntakeState.COLLECTING
        return self

    def _ensure_collecting(self):
        if self.state != IntakeState.COLLECTING:
            raise QuoteValidationError(f"quote intake is {self.state.value}, not collecting")

    def fill(
        self,
        *,
        name: str | None = None,
        phone: str | None = None,
        address: str | None = None,
        description: str | None = None,
    ) -> "QuoteIntake":
        self._ensure_collecting()
        if name is not None:
            self.name = name
        if phone is not None:
            self.phone = phone
        if address is not None:
            self.address = address
        if description is not None:
            self.description = description
        return self

    def attach(self, *attachments: ImageAttachment) -> "QuoteIntake":
        self._ensure_collecting()
        if len(self.images) + len(attachments) > self.max_images:
            raise QuoteValidationError(f"แนบรูปภาพได้สูงสุด {self.max_images} รูป")
        self.images.extend(attachments)
        return self

    def remove_image(self, index: int) -> "QuoteIntake":
        self._ensure_collecting()
        if 0 <= index < len(self.images):
            del self.images[index]
        return self

    def apply_location(self, result: GeocodeOut) -> "QuoteIntake":
        self._ensure_collecting()
        self.address = result.address
        self.warning = result.warning if result.is_fallback else None
        return self

    def validate(self):
        missing = [
            label
            for label, value in (("ชื่อ", self.name), ("เบอร์โทรศัพท์", self.phone), ("รายละเอียดงาน", self.description))
            if not (value or "").strip()
        ]
        if missing:
            raise QuoteValidationError(f"ข้อมูลไม่ครบถ้วน: กรุณากรอก{', '.join(missing)}")
        if len(self.images) > self.max_images:
            raise QuoteValidationError(f"แนบรูปภาพได้สูงสุด {self.max_images} รูป")

    def submit(self, db: Session) -> Quote:
        self._ensure_collecting()
        self.validate()

        self.state = IntakeState.SUBMITTING
        self.last_error = None
        try:
            encoded = [self.encoder(item.content, item.content_type) for item in self.images]
        except Exception as exc:
            logger.exception("[quotes] failed to encode quote images")
            self._back_to_collecting(exc)
            raise QuoteSubmissionError("ไม่สามารถประมวลผลรูปภาพได้ กรุณาลองอีกครั้ง") from exc

        try:
            quote = Quote(
                name=self.name.strip(),
                phone=self.phone.strip(),
                address=(self.address or "").strip(),
                description=self.description.strip(),
                images=encoded,
                status="new",
            )
            db.add(quote)
            db.commit()
            db.refresh(quote)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.exception("[quotes] failed to store quote request")
            self._back_to_collecting(exc)
            raise QuoteSubmissionError("ไม่สามารถส่งข้อมูลได้ กรุณาลองอีกครั้ง") from exc

        logger.info("[quotes] stored quote %s with %d image(s)", quote.quote_id, len(encoded))
        self.close()
        return quote

    def _back_to_collecting(self, exc: Exception):
        self.state = IntakeState.COLLECTING
        self.last_error = str(exc) or exc.__class__.__name__

    def reset(self) -> "QuoteIntake":
        self._clear_fields()
        self.last_error = None
        self.warning = None
        return self

    def close(self) -> "QuoteIntake":
        self.state = IntakeState.IDLE
        return self.reset()
