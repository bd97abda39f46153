"""
Stash models

- MaterialType: Yarn, Floss, Aida, ... with their unit of measure
- Material: an owned item of a given type
"""
from craftlib.models.materials.material_type import MaterialType
from craftlib.models.materials.material import Material

__all__ = ["MaterialType", "Material"]
