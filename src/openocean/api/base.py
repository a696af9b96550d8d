"""Shared base for endpoint namespaces."""

from typing import TYPE_CHECKING

from openocean.chain import ChainLike, resolve_chain

if TYPE_CHECKING:
    from openocean.client import OpenOceanClient


class ApiNamespace:
    """A group of endpoint methods bound to one client.

    Methods format a path, pick GET-with-query or POST-with-body and return
    whatever the client decodes. They hold no state of their own.
    """

    def __init__(self, client: "OpenOceanClient"):
        self.client = client

    @staticmethod
    def slug(chain: ChainLike) -> str:
        """Path segment for a chain; raises InternalError if unsupported."""
        return resolve_chain(chain).slug

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(client={self.client!r})"
