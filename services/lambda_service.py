"""
Lambda service for function lookups and invocations.
"""
from typing import Dict, Any
from logger_config import get_logger
from .base import AWSService

logger = get_logger(__name__)


class LambdaService(AWSService):
    """Service for Lambda operations."""

    service_name = 'lambda'

    async def get_function(self, function_name: str) -> Dict[str, Any]:
        """
        Get a Lambda function's configuration and code location.

        Args:
            function_name: Function name or ARN

        Returns:
            GetFunction response
        """
        return await self._call('get_function', FunctionName=function_name)

    async def invoke(self, function_name: str, payload: str | bytes) -> Dict[str, Any]:
        """
        Invoke a Lambda function synchronously.

        Args:
            function_name: Function name or ARN
            payload: JSON event passed to the function

        Returns:
            Invoke response; ``Payload`` is a streaming body holding the
            function's result
        """
        response = await self._call('invoke', FunctionName=function_name, Payload=payload)
        if response.get('FunctionError'):
            logger.warning(
                f'Lambda {function_name} returned {response["FunctionError"]} error'
            )
        return response
