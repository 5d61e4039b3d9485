from .convert import locales_to_xlsx, xlsx_to_locales
from .openpyxl_workbook import OpenpyxlWorkbook
from .tree import Leaf, Node, flatten, unflatten, with_path

__all__ = ["locales_to_xlsx", "xlsx_to_locales", "OpenpyxlWorkbook", "Leaf", "Node", "flatten", "unflatten", "with_path"]

__version__ = "0.1.0"
