"""Stage 2: Bulk import"""

from .importer import BulkImporter, chunked
from .template import build_template, write_template, template_file_name

__all__ = ["BulkImporter", "chunked", "build_template", "write_template", "template_file_name"]
