import boto3
import os
import logging

logger = logging.getLogger(__name__)

# Table names, prefixed per environment
BLOG_POSTS_TABLE = "BlogPosts"
PRODUCTS_TABLE = "Products"
TRAININGS_TABLE = "Trainings"
COMMENTS_TABLE = "Comments"
ENROLLMENTS_TABLE = "Enrollments"
TRAINING_PAGE_SETTINGS_TABLE = "TrainingPageSettings"

SLUG_INDEX = "SlugIndex"
TARGET_INDEX = "TargetIndex"

THROUGHPUT = {
    'ReadCapacityUnits': 5,
    'WriteCapacityUnits': 5
}


def _slug_index():
    return {
        'IndexName': SLUG_INDEX,
        'KeySchema': [
            {'AttributeName': 'slug', 'KeyType': 'HASH'}
        ],
        'Projection': {'ProjectionType': 'ALL'},
        'ProvisionedThroughput': THROUGHPUT
    }


TABLE_DEFINITIONS = {
    BLOG_POSTS_TABLE: {
        'KeySchema': [{'AttributeName': 'blogId', 'KeyType': 'HASH'}],
        'AttributeDefinitions': [
            {'AttributeName': 'blogId', 'AttributeType': 'S'},
            {'AttributeName': 'slug', 'AttributeType': 'S'}
        ],
        'GlobalSecondaryIndexes': [_slug_index()]
    },
    PRODUCTS_TABLE: {
        'KeySchema': [{'AttributeName': 'productId', 'KeyType': 'HASH'}],
        'AttributeDefinitions': [
            {'AttributeName': 'productId', 'AttributeType': 'S'},
            {'AttributeName': 'slug', 'AttributeType': 'S'}
        ],
        'GlobalSecondaryIndexes': [_slug_index()]
    },
    TRAININGS_TABLE: {
        'KeySchema': [{'AttributeName': 'trainingId', 'KeyType': 'HASH'}],
        'AttributeDefinitions': [
            {'AttributeName': 'trainingId', 'AttributeType': 'S'},
            {'AttributeName': 'slug', 'AttributeType': 'S'}
        ],
        'GlobalSecondaryIndexes': [_slug_index()]
    },
    COMMENTS_TABLE: {
        'KeySchema': [{'AttributeName': 'commentId', 'KeyType': 'HASH'}],
        'AttributeDefinitions': [
            {'AttributeName': 'commentId', 'AttributeType': 'S'},
            {'AttributeName': 'targetId', 'AttributeType': 'S'},
            {'AttributeName': 'createdAt', 'AttributeType': 'S'}
        ],
        'GlobalSecondaryIndexes': [
            {
                'IndexName': TARGET_INDEX,
                'KeySchema': [
                    {'AttributeName': 'targetId', 'KeyType': 'HASH'},
                    {'AttributeName': 'createdAt', 'KeyType': 'RANGE'}
                ],
                'Projection': {'ProjectionType': 'ALL'},
                'ProvisionedThroughput': THROUGHPUT
            }
        ]
    },
    ENROLLMENTS_TABLE: {
        'KeySchema': [{'AttributeName': 'enrollmentId', 'KeyType': 'HASH'}],
        'AttributeDefinitions': [
            {'AttributeName': 'enrollmentId', 'AttributeType': 'S'}
        ]
    },
    TRAINING_PAGE_SETTINGS_TABLE: {
        'KeySchema': [{'AttributeName': 'settingsId', 'KeyType': 'HASH'}],
        'AttributeDefinitions': [
            {'AttributeName': 'settingsId', 'AttributeType': 'S'}
        ]
    },
}


def table_name(name: str) -> str:
    """Physical table name for a logical table"""
    return f"{os.getenv('TABLE_PREFIX', '')}{name}"


def _connection_kwargs():
    kwargs = {
        'region_name': os.getenv('AWS_REGION', 'us-east-1'),
        'aws_access_key_id': os.getenv('AWS_ACCESS_KEY_ID'),
        'aws_secret_access_key': os.getenv('AWS_SECRET_ACCESS_KEY'),
    }
    endpoint_url = os.getenv('DYNAMODB_ENDPOINT_URL')
    if endpoint_url:
        # Local DynamoDB endpoint
        kwargs['endpoint_url'] = endpoint_url
    return kwargs


# DynamoDB Configuration
def get_dynamodb_resource():
    """Get DynamoDB resource"""
    return boto3.resource('dynamodb', **_connection_kwargs())


def get_table(name: str):
    """Get a Table handle for a logical table name"""
    return get_dynamodb_resource().Table(table_name(name))


def create_tables():
    """Create DynamoDB tables if they don't exist"""
    dynamodb = get_dynamodb_resource()

    for name, definition in TABLE_DEFINITIONS.items():
        physical_name = table_name(name)
        try:
            table = dynamodb.create_table(
                TableName=physical_name,
                ProvisionedThroughput=THROUGHPUT,
                **definition
            )
            logger.info(f"Creating {physical_name} table...")
            table.wait_until_exists()
        except dynamodb.meta.client.exceptions.ResourceInUseException:
            logger.info(f"{physical_name} table already exists")
