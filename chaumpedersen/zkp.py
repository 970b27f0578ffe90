"""Chaum-Pedersen zero-knowledge proof of equal discrete logarithms."""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass

_P_HEX = (
    "B10B8F96A080E01DDE92DE5EAE5D54EC52C99FBCFB06A3C69A6A9DCA52D23B61"
    "6073E28675A23D189838EF1E2EE652C013ECB4AEA906112324975C3CD49B83BF"
    "ACCBDD7D90C4BD7098488E9C219A73724EFFD6FAE5644738FAA31A4FF55BCCC0"
    "A151AF5F0DC8B4BD45BF37DF365C1A65E68CFDA76D4DA708DF1FB2BC2E4A4371"
)
_Q_HEX = "F518AA8781A8DF278ABA4E7D64B7CB9D49462353"
_ALPHA_HEX = (
    "A4D1CBD5C3FD34126765A442EFB99905F8104DD258AC507FD6406CFF14266D31"
    "266FEA1E5C41564B777E690F5504F213160217B4B01B886A5E91547F9E2749F4"
    "D7FBD7D3B9A92EE1909D0D2263F80A76A6A24C087A091F531DBF0A0169B6A28A"
    "D662A4D18E73AFA32D779D5918D08BC8858F4DCEF97C2A24855E6EEB22B3B2E5"
)
_BETA_EXP_HEX = "266FEA1E5C41564B777E69"

_ALPHANUMERIC = string.ascii_letters + string.digits


@dataclass(frozen=True)
class ZKP:
    """Public parameters: prime modulus p, subgroup order q, generators alpha and beta."""

    p: int
    q: int
    alpha: int
    beta: int

    @classmethod
    def standard(cls) -> "ZKP":
        """Return an instance built from the standard 1024-bit group."""
        alpha, beta, p, q = get_constants()
        return cls(p=p, q=q, alpha=alpha, beta=beta)

    def compute_pair(self, exp: int) -> tuple[int, int]:
        """Return (alpha^exp mod p, beta^exp mod p)."""
        return pow(self.alpha, exp, self.p), pow(self.beta, exp, self.p)

    def solve(self, k: int, c: int, x: int) -> int:
        """Answer the challenge: s = k - c*x mod q."""
        cx = c * x
        if k >= cx:
            return (k - cx) % self.q
        return self.q - (cx - k) % self.q

    def verify(self, r1: int, r2: int, y1: int, y2: int, c: int, s: int) -> bool:
        """Check r1 == alpha^s * y1^c and r2 == beta^s * y2^c (mod p)."""
        p = self.p
        cond1 = r1 == (pow(self.alpha, s, p) * pow(y1, c, p)) % p
        cond2 = r2 == (pow(self.beta, s, p) * pow(y2, c, p)) % p
        return cond1 and cond2


def random_below(bound: int) -> int:
    """Return a uniformly random integer in [0, bound)."""
    return secrets.randbelow(bound)


def random_string(size: int) -> str:
    """Return a random alphanumeric string of the given length."""
    return "".join(secrets.choice(_ALPHANUMERIC) for _ in range(size))


def get_constants() -> tuple[int, int, int, int]:
    """Return (alpha, beta, p, q) of the 1024-bit group with a 160-bit subgroup."""
    p = int(_P_HEX, 16)
    q = int(_Q_HEX, 16)
    alpha = int(_ALPHA_HEX, 16)
    beta = pow(alpha, int(_BETA_EXP_HEX, 16), p)
    return alpha, beta, p, q