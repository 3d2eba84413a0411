"""Posts Service: CRUD over a DynamoDB table of posts."""
