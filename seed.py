# seed.py
import logging

from volunease.db import BANNER_IMAGES, db
from volunease.logging_config import setup_logging

setup_logging()
logger = logging.getLogger("seed")

banners = [
    {
        "title": "Clean the coast",
        "description": "Join a beach cleanup near you this weekend.",
        "image": "/images/banner-beach.jpg",
    },
    {
        "title": "Feed your neighbours",
        "description": "Food banks need hands for sorting and delivery.",
        "image": "/images/banner-food.jpg",
    },
    {
        "title": "Teach and mentor",
        "description": "Share an hour a week tutoring students.",
        "image": "/images/banner-tutor.jpg",
    },
]

col = db[BANNER_IMAGES]
col.delete_many({})
result = col.insert_many(banners)

logger.info("Inserted %d banner image(s)", len(result.inserted_ids))
