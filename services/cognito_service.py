"""
Cognito user pool service.
"""
from typing import Dict, Any
from .base import AWSService


class CognitoService(AWSService):
    """Service for Cognito Identity Provider operations."""

    service_name = 'cognito-idp'

    async def describe_user_pool(self, user_pool_id: str) -> Dict[str, Any]:
        return await self._call('describe_user_pool', UserPoolId=user_pool_id)

    async def describe_user_pool_client(
        self,
        user_pool_id: str,
        client_id: str
    ) -> Dict[str, Any]:
        return await self._call(
            'describe_user_pool_client',
            UserPoolId=user_pool_id,
            ClientId=client_id
        )
