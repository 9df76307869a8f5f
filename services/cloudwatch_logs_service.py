"""
CloudWatch Logs service for reading log events.
"""
from typing import Dict, Any, List, Optional
from botocore.config import Config as BotoConfig
from config import get_config
from logger_config import get_logger
from .base import AWSService

logger = get_logger(__name__)


class CloudWatchLogsService(AWSService):
    """Service for CloudWatch Logs operations."""

    service_name = 'logs'

    def __init__(self, region: str, boto_config: Optional[BotoConfig] = None) -> None:
        """
        Initialize CloudWatch Logs service.

        Log reads made right after a deployment are often throttled, so the
        client retries with the standard backoff mode unless a config is given.

        Args:
            region: AWS region of the log group
            boto_config: Optional botocore client configuration
        """
        if boto_config is None:
            boto_config = BotoConfig(retries={
                'mode': 'standard',
                'max_attempts': get_config().cloudwatch_logs_max_attempts
            })
        super().__init__(region, boto_config)

    async def latest_log_stream_name(self, log_group_name: str) -> Optional[str]:
        """
        Find the latest log stream by name.

        Stream names such as Lambda's start with the date, so descending name
        order puts the newest stream first. lastEventTimestamp can lag by up
        to an hour and is not used.

        Args:
            log_group_name: Name of the log group

        Returns:
            Stream name, or None if the group has no streams
        """
        response = await self._call(
            'describe_log_streams',
            logGroupName=log_group_name,
            descending=True
        )
        streams = response.get('logStreams') or []
        if not streams:
            logger.info(f'Log group {log_group_name} has no log streams')
            return None
        return streams[0]['logStreamName']

    async def get_log_events(
        self,
        log_group_name: str,
        log_stream_name: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Get log events from a stream, resolving the latest stream if none is named.

        Args:
            log_group_name: Name of the log group
            log_stream_name: Stream to read; looked up when omitted

        Returns:
            List of log events, empty when the group has no streams
        """
        target_stream_name = log_stream_name
        if target_stream_name is None:
            target_stream_name = await self.latest_log_stream_name(log_group_name)
            if target_stream_name is None:
                return []

        response = await self._call(
            'get_log_events',
            logGroupName=log_group_name,
            logStreamName=target_stream_name
        )
        return response.get('events') or []
