"""Concrete collaborator adapters."""

from commentary.adapter.identity import StaticIdentityResolver

__all__ = ["StaticIdentityResolver"]
