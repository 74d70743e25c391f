"""Enums for the EZ Estimator domain models.

Every categorical project input is a closed enumeration so that the rate
tables in ``ezestimator.data.rates`` can be checked for exhaustiveness.
"""

from enum import IntEnum, StrEnum


class ProjectType(StrEnum):
    """Kinds of flatwork and concrete jobs, each with its own base rate."""

    DRIVEWAY = "driveway"
    PATIO = "patio"
    SIDEWALK = "sidewalk"
    POOL_DECK = "pool_deck"
    FOUNDATION = "foundation"
    GARAGE_FLOOR = "garage_floor"
    DECORATIVE_CONCRETE = "decorative_concrete"
    REPAIR = "repair"

    @property
    def label(self) -> str:
        """Display name used in recommendation text, e.g. ``poolDeck``."""
        head, *rest = self.value.split("_")
        return head + "".join(word.capitalize() for word in rest)


class SurfaceFinish(StrEnum):
    """Surface finish applied after the pour."""

    BROOM = "broom"
    SMOOTH = "smooth"
    EXPOSED_AGGREGATE = "exposed_aggregate"
    STAMPED = "stamped"
    COLORED = "colored"
    SEALED = "sealed"


class ReinforcementType(StrEnum):
    """Slab reinforcement options."""

    FIBER_MESH = "fiber_mesh"
    WIRE_MESH = "wire_mesh"
    REBAR = "rebar"
    NONE = "none"


class SoilType(StrEnum):
    SANDY = "sandy"
    CLAY = "clay"
    LOAM = "loam"
    ROCKY = "rocky"


class AccessDifficulty(StrEnum):
    """How hard the site is to reach with trucks and equipment.

    Recorded with the project but not priced.
    """

    EASY = "easy"
    MODERATE = "moderate"
    DIFFICULT = "difficult"


class FormworkComplexity(StrEnum):
    """Labor-difficulty tier for setting forms."""

    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"


class AdditionalService(StrEnum):
    """Optional services, named after the flags on ``AdditionalServices``."""

    DEMOLITION = "demolition"
    GRADING = "grading"
    DRAINAGE = "drainage"
    BASE_PREPARATION = "base_preparation"
    EXPANSION_JOINTS = "expansion_joints"
    CONTROL_JOINTS = "control_joints"


class SlabThickness(IntEnum):
    """Slab thickness in inches."""

    FOUR_INCH = 4
    SIX_INCH = 6
    EIGHT_INCH = 8


class ConcreteStrength(IntEnum):
    """Compressive strength of the mix in PSI."""

    PSI_2500 = 2500
    PSI_3000 = 3000
    PSI_3500 = 3500
    PSI_4000 = 4000
