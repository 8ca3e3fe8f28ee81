# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_botapi

"""Bot API secrets held in Vault.

The integrator knows which ``BotApiConfig`` fields are secrets and under
which Vault key each one lives. A lookup that fails for any reason counts as
a missing secret, so environment and ``.env`` settings still apply.
"""

from typing import Protocol, runtime_checkable

from coreason_botapi.utils.logger import logger

BOT_TOKEN_KEY = "BOT_TOKEN"

# BotApiConfig field -> Vault key
SECRET_FIELDS: dict[str, str] = {
    "token": BOT_TOKEN_KEY,
}


@runtime_checkable
class SecretStore(Protocol):
    """Anything that can look a secret up by key, e.g. ``coreason_vault.VaultClient``."""

    def get_secret(self, key: str) -> str | None: ...


def default_store() -> SecretStore | None:
    """Returns a ``coreason_vault`` client, or None if it is not installed."""
    try:
        from coreason_vault import VaultClient
    except ImportError:
        logger.debug("coreason-vault not installed; the bot token must come from the environment")
        return None
    return VaultClient()


class VaultIntegrator:
    """Reads the Bot API client's secrets from a secret store."""

    def __init__(self, store: SecretStore | None = None):
        self.store = store if store is not None else default_store()

    def get_secret(self, key: str) -> str | None:
        """Returns the secret stored under ``key``; empty values count as missing."""
        if self.store is None:
            return None
        try:
            value = self.store.get_secret(key)
        except Exception as e:
            logger.warning(f"Vault lookup of {key} failed: {e}")
            return None
        return value or None

    def config_values(self) -> dict[str, str]:
        """Returns the secret config fields that the store has values for.

        Secret values are never logged; only the field names are.
        """
        values: dict[str, str] = {}
        for field, key in SECRET_FIELDS.items():
            value = self.get_secret(key)
            if value is not None:
                values[field] = value
        if values:
            logger.debug(f"Loaded {', '.join(sorted(values))} from Vault")
        return values
