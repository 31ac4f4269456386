"""Schema management for SQL-backed providers.

The memory provider needs no schema, so both helpers are no-ops unless the
active overlay points ``databases.default`` at sqlite or postgresql.
"""

from protean.domain import Domain
from sqlalchemy import create_engine

_SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    for name, provider in domain.providers.items():
        if provider.conn_info["provider"] in _SQL_PROVIDERS:
            yield name, provider


def setup_db(domain: Domain):
    """Create tables for every registered aggregate and projection."""
    with domain.domain_context():
        for name, provider in _sql_providers(domain):
            # Accessing a repository's DAO registers its table on the provider metadata
            for registry in (domain.registry.aggregates, domain.registry.projections):
                for _, record in registry.items():
                    if record.cls.meta_.provider == name:
                        domain.repository_for(record.cls)._dao  # noqa: B018

            if hasattr(domain, "_outbox_repos") and name in domain._outbox_repos:
                domain._outbox_repos[name]._dao  # noqa: B018

            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.create_all(engine)


def drop_db(domain: Domain):
    """Drop all tables known to the SQL providers."""
    with domain.domain_context():
        for _, provider in _sql_providers(domain):
            engine = create_engine(provider.conn_info["database_uri"])
            provider._metadata.drop_all(engine)
