import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# HTTP server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# DynamoDB configuration
POSTS_TABLE = os.getenv("DYNAMODB_POSTS_TABLE", "post")
DYNAMODB_URL = os.getenv("DYNAMODB_URL")
AWS_REGION = os.getenv("AWS_REGION", "us-east-1")
# Left unset, boto3 falls back to its default credential chain
AWS_ACCESS_KEY_ID = os.getenv("AWS_ACCESS_KEY_ID")
AWS_SECRET_ACCESS_KEY = os.getenv("AWS_SECRET_ACCESS_KEY")
MAX_POOL_CONNECTIONS = int(os.getenv("DYNAMODB_MAX_POOL_CONNECTIONS", "10"))
