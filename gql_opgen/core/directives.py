"""Lexical clean-up of SDL documents before parsing.

AWS AppSync schemas carry directives and scalars that only exist on the
AppSync service. They are removed or declared here so the document builds
with a stock GraphQL implementation. Nothing here interprets directives.
"""

import re
from collections.abc import Iterable

APPSYNC_DIRECTIVES = (
    "aws_api_key",
    "aws_iam",
    "aws_oidc",
    "aws_cognito_user_pools",
    "aws_lambda",
    "aws_auth",
    "aws_subscribe",
    "aws_publish",
)

APPSYNC_SCALARS = (
    "AWSDate",
    "AWSTime",
    "AWSDateTime",
    "AWSTimestamp",
    "AWSEmail",
    "AWSJSON",
    "AWSURL",
    "AWSPhone",
    "AWSIPAddress",
)


def _directive_pattern(names: Iterable[str]) -> re.Pattern:
    alternatives = "|".join(re.escape(name) for name in names)
    # Leading blanks, the directive name, then an optional argument list
    return re.compile(rf"[ \t]*@(?:{alternatives})\b(?:\s*\([^)]*\))?")


def strip_directives(sdl: str, names: Iterable[str] = APPSYNC_DIRECTIVES) -> str:
    """Remove the named directives (and their arguments) from an SDL document.

    Example:
        >>> strip_directives('type Post @aws_auth(cognito_groups: ["Admins"]) {')
        'type Post {'
    """
    names = tuple(names)
    if not names:
        return sdl
    return _directive_pattern(names).sub("", sdl)


def declare_missing_scalars(sdl: str, names: Iterable[str] = APPSYNC_SCALARS) -> str:
    """Append ``scalar`` declarations for referenced but undeclared scalars."""
    missing = [
        name
        for name in names
        if re.search(rf"\b{re.escape(name)}\b", sdl)
        and not re.search(rf"\bscalar\s+{re.escape(name)}\b", sdl)
    ]
    if not missing:
        return sdl
    declarations = "\n".join(f"scalar {name}" for name in missing)
    return f"{sdl.rstrip()}\n\n{declarations}\n"
