from .c_lang import CGenerator, generate_c
from .dot import generate_dot
