"""
ecparams - Parameter Specifications
Value types describing an elliptic curve either explicitly (field, curve
coefficients, generator, order, cofactor) or by name.
"""

from dataclasses import dataclass


class AlgorithmParameterSpec:
    """Marker base class for every parameter descriptor type."""

    __slots__ = ()


@dataclass(frozen=True)
class ECFieldFp:
    """Prime field F(p)."""

    p: int

    @property
    def field_size(self):
        # size of the field in bits
        return self.p.bit_length()


@dataclass(frozen=True)
class ECPoint:
    """Affine point (x, y)."""

    x: int
    y: int


@dataclass(frozen=True)
class EllipticCurve:
    """Short Weierstrass curve y^2 = x^3 + a.x + b over ``field``."""

    field: ECFieldFp
    a: int
    b: int


@dataclass(frozen=True)
class ECParameterSpec(AlgorithmParameterSpec):
    """
    Explicit curve domain parameters.

    The generator is a point of prime order ``order`` on ``curve``, and
    ``cofactor`` is the number of curve points divided by ``order``.
    """

    curve: EllipticCurve
    generator: ECPoint
    order: int
    cofactor: int

    @classmethod
    def from_values(cls, p, a, b, gx, gy, n, h):
        """
        Build a parameter spec from the raw domain integers.

        Args:
            p: Field modulus
            a: Curve coefficient a
            b: Curve coefficient b
            gx: Generator x coordinate
            gy: Generator y coordinate
            n: Generator order
            h: Cofactor

        Returns:
            ECParameterSpec: The assembled parameters
        """
        return cls(EllipticCurve(ECFieldFp(p), a, b), ECPoint(gx, gy), n, h)

    def domain_key(self):
        # canonical tuple used for reverse lookups, a and b reduced mod p
        p = self.curve.field.p
        return (p, self.curve.a % p, self.curve.b % p,
                self.generator.x, self.generator.y, self.order, self.cofactor)


@dataclass(frozen=True)
class ECGenParameterSpec(AlgorithmParameterSpec):
    """Request for a curve by its name."""

    name: str
