"""Control-plane fetchers for mapt cluster resources."""

from spoticus.fetchers.base import BaseFetcher, ConnectionError, FetchError, QueryError

__all__ = ["BaseFetcher", "ConnectionError", "FetchError", "QueryError"]
