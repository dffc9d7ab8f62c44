import secrets


class SecretsEntropy:
    """Entropy adapter backed by the OS CSPRNG via the secrets module."""

    def token_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)
