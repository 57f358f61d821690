import hmac
from hashlib import sha256
from time import time


class Authenticator:
    @classmethod
    def signature(cls, secret: str, timestamp: str) -> str:
        return hmac.new(secret.encode("utf-8"), timestamp.encode("utf-8"), sha256).hexdigest()

    @classmethod
    def check(cls, secret: str, expiration_seconds: int, params: dict) -> bool:
        if not (secret and "ts" in params and "sig" in params):
            return False
        if not str(params["ts"]).isdigit():
            return False

        timestamp = int(params["ts"])
        if (time() - timestamp) > expiration_seconds:
            return False

        return hmac.compare_digest(str(params["sig"]), cls.signature(secret, str(timestamp)))
