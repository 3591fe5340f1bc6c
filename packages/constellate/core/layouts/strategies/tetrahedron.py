"""Tetrahedron layout - records spread over the four faces of a tetrahedron."""

from __future__ import annotations

import logging
import math

import numpy as np

from constellate.core.config.models import TetrahedronSettings
from constellate.core.layouts.errors import validate_count
from constellate.core.layouts.geometry import (
    as_tuple,
    as_vector,
    orientation_towards,
    outward_face_normal,
)
from constellate.core.layouts.models import LayoutKind, LayoutTarget, TriangleFace
from constellate.core.layouts.surface import triangle_surface_points

logger = logging.getLogger(__name__)

FACE_COUNT = 4


def face_point_counts(count: int, faces: int = FACE_COUNT) -> list[int]:
    """Split count points over faces as evenly as possible.

    Each face gets count // faces points and the first count % faces
    faces get one more, so the result always sums to count.

    Example:
        >>> face_point_counts(37)
        [10, 9, 9, 9]
    """
    count = validate_count(count)
    per_face, remainder = divmod(count, faces)
    return [per_face + (1 if k < remainder else 0) for k in range(faces)]


class TetrahedronLayout:
    """Distribute records across the surface of a regular tetrahedron.

    The base is an equilateral triangle in the y = 0 plane inscribed in a
    circle of base_radius; the apex sits above the base centroid. Faces
    are filled in order: base, then (v0, v1, apex), (v1, v2, apex) and
    (v2, v0, apex). All records on a face share its outward orientation.

    Face points come from stride sampling a barycentric grid that is
    always large enough, so output is deterministic. The random top-up
    path in the surface generator is only reachable through
    face_resolution; the injected rng (or settings.seed) controls it.

    Attributes:
        layout_id: Unique identifier ("tetrahedron").
    """

    layout_id: str = LayoutKind.TETRAHEDRON.value

    def __init__(
        self,
        settings: TetrahedronSettings | None = None,
        *,
        face_resolution: int | None = None,
    ) -> None:
        """Initialize the layout.

        Args:
            settings: Geometry and randomness settings.
            face_resolution: Fixed barycentric grid resolution for every face.
                None sizes the grid to each face's point count.
        """
        self.settings = settings or TetrahedronSettings()
        self.face_resolution = face_resolution

    def vertices(self) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Return the three base vertices followed by the apex."""
        r = self.settings.base_radius
        v0 = np.array([r, 0.0, 0.0])
        v1 = np.array([-r / 2, 0.0, r * math.sqrt(3) / 2])
        v2 = np.array([-r / 2, 0.0, -r * math.sqrt(3) / 2])
        # Regular solid: edge r*sqrt(3) gives height r*sqrt(2)
        apex = np.array([0.0, r * math.sqrt(2), 0.0])
        return v0, v1, v2, apex

    def faces(self) -> list[TriangleFace]:
        """Return the four faces in traversal order with outward normals."""
        v0, v1, v2, apex = self.vertices()
        center = (v0 + v1 + v2 + apex) / 4.0
        corners = [(v0, v1, v2), (v0, v1, apex), (v1, v2, apex), (v2, v0, apex)]
        return [
            TriangleFace(
                vertices=(as_tuple(a), as_tuple(b), as_tuple(c)),
                normal=as_tuple(outward_face_normal(a, b, c, center)),
            )
            for a, b, c in corners
        ]

    def generate(self, count: int, *, rng: np.random.Generator | None = None) -> list[LayoutTarget]:
        """Generate tetrahedron targets for count records.

        Args:
            count: Number of records (>= 0).
            rng: Random source for the surface top-up path. Defaults to a
                generator seeded with settings.seed (unseeded when None).

        Returns:
            Exactly count targets, face by face.
        """
        count = validate_count(count)
        if rng is None:
            rng = np.random.default_rng(self.settings.seed)

        targets: list[LayoutTarget] = []
        for face, face_count in zip(self.faces(), face_point_counts(count), strict=True):
            if face_count == 0:
                continue
            a, b, c = (as_vector(v) for v in face.vertices)
            rotation = orientation_towards(as_vector(face.normal))
            points = triangle_surface_points(
                a,
                b,
                c,
                face_count,
                resolution=self.face_resolution,
                jitter=self.settings.jitter,
                rng=rng,
            )
            targets.extend(
                LayoutTarget(position=as_tuple(point), rotation=rotation) for point in points
            )

        logger.debug(f"Tetrahedron: generated {len(targets)} targets for {count} records")
        return targets


def get_tetrahedron_layout(
    count: int,
    settings: TetrahedronSettings | None = None,
    *,
    rng: np.random.Generator | None = None,
) -> list[LayoutTarget]:
    """Generate tetrahedron targets with the given (or default) settings."""
    return TetrahedronLayout(settings).generate(count, rng=rng)
