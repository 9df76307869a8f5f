"""
Service layer for AWS operations.

One wrapper class per AWS service, each bound to a single region and
building its boto3 client on first use.
"""
from .appsync_service import AppSyncService
from .cloudwatch_logs_service import CloudWatchLogsService
from .cognito_service import CognitoService
from .dynamodb_service import DynamoDBService
from .kinesis_service import KinesisService
from .lambda_service import LambdaService
from .lex_service import LexService
from .rekognition_service import RekognitionService
from .s3_service import S3Service

__all__ = [
    'AppSyncService',
    'CloudWatchLogsService',
    'CognitoService',
    'DynamoDBService',
    'KinesisService',
    'LambdaService',
    'LexService',
    'RekognitionService',
    'S3Service',
]
