"""Salting and digest computation of the authn ID."""

import base64
import hashlib

from ....core.exceptions import DigestError

DIGEST_ALGORITHM = "sha256"
INPUT_ENCODING = "utf-8"


def salt_input(pre_salt_input: str, prefix_salt: str = "", postfix_salt: str = "") -> str:
    """Add the prefix- and postfix-salts around the input."""
    return prefix_salt + pre_salt_input + postfix_salt


def compute_authn_id(salted_input: str, algorithm: str = DIGEST_ALGORITHM) -> str:
    """Hash the UTF-8 input and return the digest as padded standard Base64.

    Raises:
        DigestError: The algorithm is unavailable or the input cannot be encoded.
    """
    try:
        digest = hashlib.new(algorithm)
    except ValueError as e:
        raise DigestError(
            "Could not use the configured digest algorithm",
            details={"algorithm": algorithm},
        ) from e

    try:
        digest.update(salted_input.encode(INPUT_ENCODING))
    except UnicodeEncodeError as e:
        raise DigestError(
            "Could not encode the input for the digest algorithm",
            details={"encoding": INPUT_ENCODING},
        ) from e

    return base64.b64encode(digest.digest()).decode("ascii")
