"""Shared fixtures."""

import logging
from pathlib import Path

import pytest

from gql_opgen.core.parser import SchemaParser

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def parse_sdl():
    """Return a callable turning an SDL string into an IRSchema."""
    def _parse(sdl: str, strip_directives: bool = True):
        return SchemaParser(strip_directives=strip_directives).parse_sdl(sdl)
    return _parse


@pytest.fixture
def user_schema(parse_sdl):
    """A small schema with a self-referencing object type."""
    return parse_sdl(
        """
        type User {
          id: ID!
          name: String!
          friends: [User!]!
        }

        type Query {
          me: User
          getUser(id: ID!): User
        }
        """
    )


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers and levels installed by configure_logging()."""
    yield
    logger = logging.getLogger("gql_opgen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
