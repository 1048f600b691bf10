"""vaporgen scaffolder -- renders and writes the Swift files of a resource.

Quick usage::

    from vaporgen.scaffolder import ResourceGenerator

    generator = ResourceGenerator()
    result = generator.generate("Product", ["title:string", "price:int"])
"""

from vaporgen.scaffolder.generator import GenerationResult, ResourceGenerator
from vaporgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "GenerationResult",
    "ResourceGenerator",
    "TemplateRenderer",
]
