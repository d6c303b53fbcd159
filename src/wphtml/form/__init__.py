from wphtml.form import control, field

__all__ = ["control", "field"]
