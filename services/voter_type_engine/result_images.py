"""
Illustration lookup for result types.
Maps each voter type to the image shown on its result card.
"""
import logging
from typing import Dict, Optional, Sequence

from pydantic import BaseModel

from .models import ResultType

logger = logging.getLogger(__name__)


class ResultImage(BaseModel):
    src: str
    alt_bn: str
    alt_en: Optional[str] = None


RESULT_IMAGE_MAP: Dict[ResultType, ResultImage] = {
    ResultType.LAST_MINUTE_SPRINTER: ResultImage(
        src="/results/last_minute_sprinter.png",
        alt_bn="লাস্ট-মিনিট স্প্রিন্টার",
        alt_en="Last-Minute Sprinter illustration",
    ),
    ResultType.POSTER_NOSTALGIC: ResultImage(
        src="/results/poster_nostalgic.png",
        alt_bn="পোস্টার-নস্টালজিক",
        alt_en="Poster Nostalgic illustration",
    ),
    ResultType.INFO_DETECTIVE: ResultImage(
        src="/results/info_detective.png",
        alt_bn="ইনফো-ডিটেকটিভ",
        alt_en="Info Detective illustration",
    ),
    ResultType.PHONE_FREE_HERO: ResultImage(
        src="/results/phone_free_hero.png",
        alt_bn="ফোন-ফ্রি হিরো",
        alt_en="Phone-Free Hero illustration",
    ),
    ResultType.SEAL_SNIPER: ResultImage(
        src="/results/seal_sniper.png",
        alt_bn="সিল-স্নাইপার",
        alt_en="Seal Sniper illustration",
    ),
    ResultType.CONFUSION_CUTE: ResultImage(
        src="/results/confusion_but_cute.png",
        alt_bn="কনফিউজড-বাট-কিউট",
        alt_en="Confusion but Cute illustration",
    ),
    ResultType.QUEUE_ZEN: ResultImage(
        src="/results/queue_zen_master.png",
        alt_bn="লাইন-জেন মাস্টার",
        alt_en="Queue Zen Master illustration",
    ),
    ResultType.PROCESS_PRO: ResultImage(
        src="/results/process_pro.png",
        alt_bn="প্রসেস-প্রো",
        alt_en="Process Pro illustration",
    ),
}

DEFAULT_RESULT_IMAGE = ResultImage(
    src="/results/default.png",
    alt_bn="ভোটার টাইপ",
    alt_en="Voter Type illustration",
)


def get_result_image(result_type: str) -> ResultImage:
    """
    Returns the illustration for a voter type label.
    Falls back to the generic image for labels without a mapping.
    """
    for key, image in RESULT_IMAGE_MAP.items():
        if key.value == str(result_type):
            return image
    logger.warning(f"No image mapping found for type: {result_type}")
    return DEFAULT_RESULT_IMAGE


def validate_image_mapping(result_types: Sequence[str]) -> bool:
    """Checks that every result type has an image. Meant for tests and app startup."""
    mapped_keys = {key.value for key in RESULT_IMAGE_MAP}
    missing = [str(rt) for rt in result_types if str(rt) not in mapped_keys]

    if missing:
        logger.error(f"Missing image mappings for: {missing}")
        return False

    if len(mapped_keys) != len(result_types):
        logger.warning(
            f"Mapping count ({len(mapped_keys)}) doesn't match result types count ({len(result_types)})"
        )

    return True
