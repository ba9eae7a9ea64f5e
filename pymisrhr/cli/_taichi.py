"""Taichi backend selection for the CLI commands."""

import taichi as ti

_ARCHS = {
    "cpu": (ti.cpu,),
    "gpu": (ti.cuda, ti.vulkan, ti.metal, ti.opengl),
}


def init_taichi(arch="cpu"):
    """Initialise Taichi on the requested backend, falling back to CPU."""
    for candidate in _ARCHS[arch]:
        try:
            ti.init(arch=candidate)
            return candidate
        except Exception:
            pass
    ti.init(arch=ti.cpu)
    return ti.cpu
