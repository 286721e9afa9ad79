# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Pitch trajectory physics (Nathan model).

Back-solves a pitch's flight from the tracking system's nine-parameter fit
(initial position, velocity and constant acceleration at y = 50 ft) plus the
pitcher's release extension.  The result separates the acceleration into a
drag component along the average velocity and a transverse (Magnus)
component, and reports spin-induced movement at the plate.

Units follow the tracking data: feet, seconds, ft/s and ft/s^2.  Breaks are
reported in inches and the spin-axis angle in degrees.

Either every derived quantity is present or none are: missing inputs and
degenerate geometry both produce ``TrajectoryMetrics.empty()``.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Optional

from models import PitchData

# Distance from the rubber to the front of home plate (ft).
RUBBER_TO_PLATE_FT = 60.5

# Tracking data reports the plate crossing at the back tip of home plate.
PLATE_FRONT_Y_FT = 17.0 / 12.0

GRAVITY_FT_S2 = 32.174

# Drag constant: rho * A / (2 * m) for a regulation ball at sea level (1/ft).
DRAG_CONSTANT = 5.383e-3

_EPSILON = 1e-9


@dataclass(frozen=True)
class TrajectoryInputs:
    x0: float
    y0: float
    z0: float
    vx0: float
    vy0: float
    vz0: float
    ax: float
    ay: float
    az: float
    plate_x: float
    plate_z: float
    extension: float

    @classmethod
    def from_pitch(cls, pitch_data: Optional[PitchData]) -> Optional[TrajectoryInputs]:
        """Collect the model inputs from a pitch, or None if any is missing."""
        if pitch_data is None:
            return None
        c = pitch_data.coordinates
        values = {
            "x0": c.x0,
            "y0": c.y0,
            "z0": c.z0,
            "vx0": c.v_x0,
            "vy0": c.v_y0,
            "vz0": c.v_z0,
            "ax": c.a_x,
            "ay": c.a_y,
            "az": c.a_z,
            "plate_x": c.p_x,
            "plate_z": c.p_z,
            "extension": pitch_data.extension,
        }
        if any(v is None for v in values.values()):
            return None
        return cls(**values)


@dataclass(frozen=True)
class TrajectoryMetrics:
    xr: Optional[float] = None
    yr: Optional[float] = None
    zr: Optional[float] = None
    tr: Optional[float] = None
    vxr: Optional[float] = None
    vyr: Optional[float] = None
    vzr: Optional[float] = None
    tf: Optional[float] = None
    vxbar: Optional[float] = None
    vybar: Optional[float] = None
    vzbar: Optional[float] = None
    vbar: Optional[float] = None
    vxhat: Optional[float] = None
    vyhat: Optional[float] = None
    vzhat: Optional[float] = None
    ad: Optional[float] = None
    atx: Optional[float] = None
    aty: Optional[float] = None
    atz: Optional[float] = None
    atx_hat: Optional[float] = None
    aty_hat: Optional[float] = None
    atz_hat: Optional[float] = None
    at: Optional[float] = None
    phi_t: Optional[float] = None
    ivb: Optional[float] = None
    hb: Optional[float] = None
    cd: Optional[float] = None

    @classmethod
    def empty(cls) -> TrajectoryMetrics:
        return cls()

    def as_dict(self) -> dict[str, Optional[float]]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------

def _solve_time(velocity: float, accel: float, distance: float) -> Optional[float]:
    """Time for y(t) to travel ``distance`` toward the plate, or None.

    Solves ``0.5 * accel * t^2 + velocity * t + distance = 0`` for the root
    that matches a pitch moving in -y.
    """
    if abs(accel) < _EPSILON:
        return None
    discriminant = velocity * velocity - 2.0 * accel * distance
    if discriminant < 0:
        return None
    return (-velocity - math.sqrt(discriminant)) / accel


def compute_trajectory(inputs: Optional[TrajectoryInputs]) -> TrajectoryMetrics:
    """Derive release-point and movement quantities for one pitch.

    Args:
        inputs: Complete model inputs, or None when the pitch lacks them.

    Returns:
        A fully-populated ``TrajectoryMetrics``, or ``TrajectoryMetrics.empty()``
        when inputs are missing or the geometry is degenerate.
    """
    if inputs is None:
        return TrajectoryMetrics.empty()

    ax, ay, az = inputs.ax, inputs.ay, inputs.az

    # Release point
    yr = RUBBER_TO_PLATE_FT - inputs.extension
    tr = _solve_time(inputs.vy0, ay, inputs.y0 - yr)
    if tr is None:
        return TrajectoryMetrics.empty()
    xr = inputs.x0 + inputs.vx0 * tr + 0.5 * ax * tr * tr
    zr = inputs.z0 + inputs.vz0 * tr + 0.5 * az * tr * tr

    vxr = inputs.vx0 + ax * tr
    vyr = inputs.vy0 + ay * tr
    vzr = inputs.vz0 + az * tr

    # Flight time, release to the front of the plate
    tf = _solve_time(vyr, ay, yr - PLATE_FRONT_Y_FT)
    if tf is None or tf <= 0:
        return TrajectoryMetrics.empty()

    # Average velocity over the flight
    vxbar = (2.0 * vxr + ax * tf) / 2.0
    vybar = (2.0 * vyr + ay * tf) / 2.0
    vzbar = (2.0 * vzr + az * tf) / 2.0
    vbar = math.sqrt(vxbar * vxbar + vybar * vybar + vzbar * vzbar)
    if vbar < _EPSILON:
        return TrajectoryMetrics.empty()
    vxhat = vxbar / vbar
    vyhat = vybar / vbar
    vzhat = vzbar / vbar

    # Drag acts opposite the average velocity
    ad = -(ax * vxbar + ay * vybar + (az + GRAVITY_FT_S2) * vzbar) / vbar

    # Transverse (Magnus) acceleration
    atx = ax + ad * vxhat
    aty = ay + ad * vyhat
    atz = az + ad * vzhat + GRAVITY_FT_S2
    at = math.sqrt(atx * atx + aty * aty + atz * atz)
    if at < _EPSILON:
        return TrajectoryMetrics.empty()
    atx_hat = atx / at
    aty_hat = aty / at
    atz_hat = atz / at

    phi_t = math.degrees(math.atan2(atz, atx))
    if phi_t < 0:
        phi_t += 360.0

    # Spin-induced movement over the flight, in inches
    ivb = 0.5 * atz * tf * tf * 12.0
    hb = 0.5 * atx * tf * tf * 12.0

    cd = ad / (DRAG_CONSTANT * vbar * vbar)

    metrics = TrajectoryMetrics(
        xr=xr, yr=yr, zr=zr, tr=tr,
        vxr=vxr, vyr=vyr, vzr=vzr, tf=tf,
        vxbar=vxbar, vybar=vybar, vzbar=vzbar, vbar=vbar,
        vxhat=vxhat, vyhat=vyhat, vzhat=vzhat,
        ad=ad, atx=atx, aty=aty, atz=atz,
        atx_hat=atx_hat, aty_hat=aty_hat, atz_hat=atz_hat, at=at,
        phi_t=phi_t, ivb=ivb, hb=hb, cd=cd,
    )
    if not all(math.isfinite(v) for v in metrics.as_dict().values()):
        return TrajectoryMetrics.empty()
    return metrics
