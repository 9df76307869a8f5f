"""
AppSync service for GraphQL API lookups.
"""
from typing import Dict, Any
from .base import AWSService


class AppSyncService(AWSService):
    """Service for AppSync operations."""

    service_name = 'appsync'

    async def get_graphql_api(self, api_id: str) -> Dict[str, Any]:
        """
        Get a GraphQL API by ID.

        Args:
            api_id: AppSync API ID

        Returns:
            GetGraphqlApi response
        """
        return await self._call('get_graphql_api', apiId=api_id)
