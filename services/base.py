"""
Base class for regional AWS service wrappers.
"""
import asyncio
import boto3
from typing import Any, Dict, Optional
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError
from config import get_config
from logger_config import get_logger

logger = get_logger(__name__)


class AWSService:
    """
    Lazily builds one boto3 client for ``service_name`` in ``region`` and
    runs its operations off the event loop.
    """

    service_name: str = ''

    def __init__(self, region: str, boto_config: Optional[BotoConfig] = None) -> None:
        """
        Initialize the service wrapper.

        Args:
            region: AWS region the client talks to
            boto_config: Optional botocore client configuration
        """
        self.region = region
        self.boto_config = boto_config
        self._client = None

    @property
    def client(self):
        """Lazy initialization of the boto3 client."""
        if self._client is None:
            kwargs: Dict[str, Any] = {'region_name': self.region}
            if self.boto_config is not None:
                kwargs['config'] = self.boto_config
            endpoint_url = get_config().endpoint_url
            if endpoint_url:
                kwargs['endpoint_url'] = endpoint_url
            self._client = boto3.client(self.service_name, **kwargs)
        return self._client

    async def _call(self, operation: str, **params: Any) -> Dict[str, Any]:
        """
        Await a single SDK operation.

        Args:
            operation: boto3 method name, e.g. ``describe_table``
            **params: Request parameters passed through unchanged

        Returns:
            The SDK response dictionary

        Raises:
            ClientError: If the service rejects the request
            BotoCoreError: If the request never reaches the service
        """
        method = getattr(self.client, operation)
        logger.debug(f'{self.service_name} {operation} in {self.region}')
        try:
            return await asyncio.to_thread(method, **params)
        except (ClientError, BotoCoreError) as e:
            logger.error(f'{self.service_name} {operation} failed in {self.region}: {str(e)}')
            raise
