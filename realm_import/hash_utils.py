import hashlib


def sha256_bytes(b: bytes) -> str:
    return hashlib.sha256(b).hexdigest()


# Change-detection key stamped onto every imported realm
checksum = sha256_bytes
