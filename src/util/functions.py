from typing import Any, Iterable

from pydantic import SecretStr


def mask_secret(secret: str | SecretStr | None = None, mask: str = "*") -> str | None:
    if secret is None:
        return None
    # extract the secret value
    if isinstance(secret, SecretStr):
        secret = secret.get_secret_value()
    # short strings: mask all
    if len(secret) <= 4:
        return mask * len(secret)
    # medium strings: show one char on each side
    if len(secret) <= 8:
        return secret[0] + (mask * (len(secret) - 2)) + secret[-1:]
    # long strings: show 3 chars on each end with 5 masks in the middle
    return secret[:3] + (mask * 5) + secret[-3:]


def normalize_username(username: str | None) -> str | None:
    if username is None:
        return None
    return username.replace("@", "").replace(" ", "").strip()


def first_present(source: Any, names: Iterable[str]) -> str | None:
    for name in names:
        if getattr(source, name, None) is not None:
            return name
    return None
