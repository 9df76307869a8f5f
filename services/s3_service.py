"""
S3 service for bucket checks.
"""
from typing import Dict, Any
from .base import AWSService


class S3Service(AWSService):
    """Service for S3 operations."""

    service_name = 's3'

    async def head_bucket(self, bucket_name: str) -> Dict[str, Any]:
        """
        Check that a bucket exists and is reachable with the current credentials.

        Args:
            bucket_name: Name of the S3 bucket

        Returns:
            HeadBucket response

        Raises:
            ClientError: 404 if the bucket is missing, 403 if it is not ours
        """
        return await self._call('head_bucket', Bucket=bucket_name)
