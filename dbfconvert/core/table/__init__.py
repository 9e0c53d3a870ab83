from .field_descriptor import FieldDescriptor
from .table_structure import TableStructure
from .record import Record


__all__ = ["FieldDescriptor", "TableStructure", "Record"]
