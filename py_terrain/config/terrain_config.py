"""
Generation options for diamond-square terrain.

``TerrainConfig`` only accepts its declared fields; unknown keys are
rejected rather than silently copied onto the generator.
"""

from pydantic import BaseModel, Field, StrictInt, ValidationError, field_validator

from ..errors import InvalidConfigError


def is_valid_size(size: int) -> bool:
    """True for 1 and for every ``2^n + 1``, the sizes that subdivide cleanly."""
    span = size - 1
    return size == 1 or (span > 0 and span & (span - 1) == 0)


class TerrainConfig(BaseModel):
    """Options for a single terrain generation pass."""

    size: StrictInt = Field(default=9, ge=1, description="Grid side length (1 or 2^n + 1)")
    noise: float = Field(
        default=0.1, ge=0.0, allow_inf_nan=False, description="Initial displacement magnitude"
    )

    # Legacy options, accepted but not used by the subdivision
    deviation: float = Field(default=5.0, description="Unused, kept for compatibility")
    roughness: float = Field(default=13.0, description="Unused, kept for compatibility")

    class Config:
        extra = "forbid"
        frozen = True

    @field_validator("size")
    @classmethod
    def _subdivisible_size(cls, value: int) -> int:
        if not is_valid_size(value):
            raise ValueError(f"size must be 1 or 2^n + 1 (3, 5, 9, 17, ...), got {value}")
        return value

    @classmethod
    def create(cls, **options) -> "TerrainConfig":
        """Build a config, reporting validation failures as InvalidConfigError."""
        try:
            return cls(**options)
        except ValidationError as e:
            raise InvalidConfigError(str(e)) from e

    @classmethod
    def from_settings(cls, settings, **overrides) -> "TerrainConfig":
        """
        Build a config using the environment-driven defaults.

        Args:
            settings: Settings instance providing default_size, default_noise
                and max_size
            **overrides: Explicit option values taking precedence

        Returns:
            Validated TerrainConfig
        """
        options = {"size": settings.default_size, "noise": settings.default_noise}
        options.update(overrides)

        config = cls.create(**options)
        if config.size > settings.max_size:
            raise InvalidConfigError(
                f"size {config.size} exceeds configured maximum {settings.max_size}"
            )
        return config
