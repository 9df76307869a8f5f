"""
Async SDK call helpers used by end-to-end tests.

Each helper builds a fresh regional client, awaits one AWS API call and
returns the raw response. Most helpers let SDK errors reach the caller;
``get_user_pool``, ``get_user_pool_clients`` and ``get_lambda_function``
log them and return an empty result instead. Only botocore's
``ClientError`` and ``BotoCoreError`` are swallowed; credential, parameter
validation and endpoint failures are all ``BotoCoreError``. Any other
exception still reaches the caller.
"""
from typing import Any, Dict, List, Optional
from botocore.exceptions import BotoCoreError, ClientError
from logger_config import get_logger
from services import (
    AppSyncService,
    CloudWatchLogsService,
    CognitoService,
    DynamoDBService,
    KinesisService,
    LambdaService,
    LexService,
    RekognitionService,
    S3Service,
)
from utils.decorators import swallow_sdk_errors

logger = get_logger(__name__)

__all__ = [
    'get_ddb_table',
    'check_if_bucket_exists',
    'get_user_pool',
    'get_user_pool_clients',
    'get_bot',
    'get_lambda_function',
    'get_function',
    'invoke_function',
    'get_table',
    'delete_table',
    'get_appsync_api',
    'get_collection',
    'get_cloudwatch_logs',
    'put_kinesis_records',
]


async def get_ddb_table(table_name: str, region: str) -> Dict[str, Any]:
    return await DynamoDBService(region).describe_table(table_name)


async def check_if_bucket_exists(bucket_name: str, region: str) -> Dict[str, Any]:
    """Raises ClientError (404/403) when the bucket is missing or inaccessible."""
    return await S3Service(region).head_bucket(bucket_name)


@swallow_sdk_errors()
async def get_user_pool(user_pool_id: str, region: str) -> Optional[Dict[str, Any]]:
    return await CognitoService(region).describe_user_pool(user_pool_id)


async def get_user_pool_clients(
    user_pool_id: str,
    client_ids: List[str],
    region: str
) -> List[Dict[str, Any]]:
    """
    Describe user pool clients one after another.

    Args:
        user_pool_id: Cognito user pool ID
        client_ids: App client IDs, described in this order
        region: AWS region of the user pool

    Returns:
        DescribeUserPoolClient responses. The first failure is logged and
        ends the loop; responses gathered before it are still returned.
    """
    service = CognitoService(region)
    results: List[Dict[str, Any]] = []
    try:
        for client_id in client_ids:
            results.append(
                await service.describe_user_pool_client(user_pool_id, client_id)
            )
    except (ClientError, BotoCoreError) as e:
        logger.error(
            f'Describing clients of user pool {user_pool_id} stopped after '
            f'{len(results)} of {len(client_ids)}: {str(e)}',
            exc_info=True
        )
    return results


async def get_bot(bot_name: str, region: str) -> Dict[str, Any]:
    return await LexService(region).get_bot(bot_name)


@swallow_sdk_errors()
async def get_lambda_function(function_name: str, region: str) -> Optional[Dict[str, Any]]:
    return await LambdaService(region).get_function(function_name)


async def get_function(function_name: str, region: str) -> Dict[str, Any]:
    return await LambdaService(region).get_function(function_name)


async def invoke_function(function_name: str, payload: str, region: str) -> Dict[str, Any]:
    return await LambdaService(region).invoke(function_name, payload)


async def get_collection(collection_id: str, region: str) -> Dict[str, Any]:
    return await RekognitionService(region).describe_collection(collection_id)


async def get_table(table_name: str, region: str) -> Dict[str, Any]:
    return await DynamoDBService(region).describe_table(table_name)


async def delete_table(table_name: str, region: str) -> Dict[str, Any]:
    return await DynamoDBService(region).delete_table(table_name)


async def get_appsync_api(appsync_api_id: str, region: str) -> Dict[str, Any]:
    return await AppSyncService(region).get_graphql_api(appsync_api_id)


async def get_cloudwatch_logs(
    region: str,
    log_group_name: str,
    log_stream_name: Optional[str] = None
) -> List[Dict[str, Any]]:
    """
    Read log events from a log group.

    Args:
        region: AWS region of the log group
        log_group_name: Name of the log group
        log_stream_name: Stream to read; the last stream in descending
            name order is used when omitted

    Returns:
        Log events, or an empty list when the group has no streams
    """
    return await CloudWatchLogsService(region).get_log_events(log_group_name, log_stream_name)


async def put_kinesis_records(
    data: str,
    partition_key: str,
    stream_name: str,
    region: str
) -> Dict[str, Any]:
    return await KinesisService(region).put_record(data, partition_key, stream_name)
