import os
import sys
import json
import logging
from typing import Any, Dict, List

from pydantic import ValidationError

# Dynamically add the parent directory to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config.db_config import create_tables
from helpers import content_helper
from helpers.dynamodb_helper import slugify
from helpers.training_page_helper import ensure_training_page_settings
from models.content import BlogPostFields, ProductFields
from models.training import TrainingFields

logger = logging.getLogger(__name__)

# Sample content: (collection kind, data file, model used to validate each record)
SAMPLE_CONTENT = [
    ("training", "trainings.json", TrainingFields),
    ("blog", "blog_posts.json", BlogPostFields),
    ("product", "products.json", ProductFields),
]


def initialize_database():
    """
    Create the tables and the training page settings singleton.
    Safe to run repeatedly.
    """
    create_tables()
    ensure_training_page_settings()


def load_json_data(file_path: str) -> List[Dict[str, Any]]:
    """
    Load data from a JSON file located in the 'data' directory.
    """
    current_dir = os.path.dirname(os.path.abspath(__file__))
    full_path = os.path.join(current_dir, "data", file_path)

    try:
        with open(full_path, 'r') as file:
            return json.load(file)
    except FileNotFoundError:
        logger.error(f"File not found: {full_path}")
        raise
    except json.JSONDecodeError:
        logger.error(f"Invalid JSON format in file: {full_path}")
        raise


def seed_collection(kind: str, data_file: str, model) -> int:
    """
    Seed records into a content collection, skipping slugs that already exist.
    Returns the number of records written.
    """
    records = load_json_data(data_file)

    # Validate the data before seeding
    try:
        validated = [model(**record).model_dump(mode="json") for record in records]
    except ValidationError as e:
        logger.error(f"Data validation failed for file {data_file}: {e}")
        raise

    written = 0
    for fields in validated:
        title = fields[content_helper.COLLECTIONS[kind].title_field]
        if content_helper.find_by_slug(kind, slugify(title)):
            logger.info(f"Skipping existing {kind}: {title}")
            continue
        content_helper.create_item(kind, fields)
        written += 1
    logger.info(f"Seeded {written} {kind} records from {data_file}")
    return written


def seed_all():
    """
    Initialize the database and load the sample content.
    """
    logger.info("Starting database seeding...")
    try:
        initialize_database()
        for kind, data_file, model in SAMPLE_CONTENT:
            seed_collection(kind, data_file, model)
        logger.info("Database seeding completed successfully!")
    except Exception as e:
        logger.error(f"Database seeding failed: {e}")
        raise


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_all()
