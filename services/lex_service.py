"""
Lex (V1 model building) service.
"""
from typing import Dict, Any, Optional
from config import get_config
from .base import AWSService


class LexService(AWSService):
    """Service for Lex model building operations."""

    service_name = 'lex-models'

    async def get_bot(
        self,
        bot_name: str,
        version_or_alias: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Get a Lex bot definition.

        Args:
            bot_name: Name of the bot
            version_or_alias: Bot version or alias (defaults to LEX_BOT_VERSION)

        Returns:
            GetBot response
        """
        return await self._call(
            'get_bot',
            name=bot_name,
            versionOrAlias=version_or_alias or get_config().lex_bot_version
        )
