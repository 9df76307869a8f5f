"""
DynamoDB service for table operations.
"""
from typing import Dict, Any, TYPE_CHECKING
from logger_config import get_logger
from .base import AWSService

if TYPE_CHECKING:
    from mypy_boto3_dynamodb import DynamoDBClient
else:
    DynamoDBClient = Any

logger = get_logger(__name__)


class DynamoDBService(AWSService):
    """Service for DynamoDB table operations."""

    service_name = 'dynamodb'
    client: DynamoDBClient

    async def describe_table(self, table_name: str) -> Dict[str, Any]:
        """
        Describe a DynamoDB table.

        Args:
            table_name: Name of the DynamoDB table

        Returns:
            DescribeTable response

        Raises:
            ClientError: If the table does not exist or the call fails
        """
        return await self._call('describe_table', TableName=table_name)

    async def delete_table(self, table_name: str) -> Dict[str, Any]:
        """
        Delete a DynamoDB table.

        Args:
            table_name: Name of the DynamoDB table

        Returns:
            DeleteTable response

        Raises:
            ClientError: If the table does not exist or the call fails
        """
        response = await self._call('delete_table', TableName=table_name)
        logger.info(f'Requested deletion of DynamoDB table {table_name} in {self.region}')
        return response
