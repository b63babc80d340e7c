from metamesh.generators.box import generate_box
from metamesh.generators.cylinder import generate_cylinder
from metamesh.generators.disc import generate_disc
from metamesh.generators.icosphere import generate_icosphere
from metamesh.generators.plane import generate_plane
from metamesh.generators.ring import generate_ring
from metamesh.generators.rounded_box import generate_rounded_box
from metamesh.generators.sphere import generate_sphere
from metamesh.generators.teapot import generate_teapot, tessellate_patches

__all__ = [
    "generate_plane",
    "generate_box",
    "generate_rounded_box",
    "generate_sphere",
    "generate_icosphere",
    "generate_cylinder",
    "generate_ring",
    "generate_disc",
    "generate_teapot",
    "tessellate_patches",
]
