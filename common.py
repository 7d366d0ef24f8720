from os import getenv

import httpx

CLIENT = httpx.Client(follow_redirects=True)


def require_env(name: str) -> str:
    if not (value := getenv(name)):
        raise RuntimeError(f"{name} is not set")
    return value
