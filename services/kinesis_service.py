"""
Kinesis service for stream ingestion.
"""
from typing import Dict, Any
from logger_config import get_logger
from .base import AWSService

logger = get_logger(__name__)


class KinesisService(AWSService):
    """Service for Kinesis Data Streams operations."""

    service_name = 'kinesis'

    async def put_record(
        self,
        data: str | bytes,
        partition_key: str,
        stream_name: str
    ) -> Dict[str, Any]:
        """
        Put a single record through the batch PutRecords API.

        Args:
            data: Record payload
            partition_key: Key used to pick the shard
            stream_name: Name of the Kinesis data stream

        Returns:
            PutRecords response
        """
        response = await self._call(
            'put_records',
            Records=[
                {
                    'Data': data,
                    'PartitionKey': partition_key
                }
            ],
            StreamName=stream_name
        )
        if response.get('FailedRecordCount'):
            logger.warning(
                f'Kinesis stream {stream_name} rejected '
                f'{response["FailedRecordCount"]} record(s)'
            )
        return response
