"""
Rekognition service for face collections.
"""
from typing import Dict, Any
from .base import AWSService


class RekognitionService(AWSService):
    """Service for Rekognition operations."""

    service_name = 'rekognition'

    async def describe_collection(self, collection_id: str) -> Dict[str, Any]:
        return await self._call('describe_collection', CollectionId=collection_id)
