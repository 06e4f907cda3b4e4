# src/brownian2d/errors.py

class InvalidParameterError(ValueError):
    """
    Parametri de intrare invalizi (ne-pozitivi, ne-finiți, N < 2, căi de
    configurare amestecate). Se ridică ÎNAINTE de orice extragere aleatoare,
    deci nu există rezultate parțiale.
    """


class NumericOverflowError(ArithmeticError):
    """Traiectoria conține valori ne-finite (scală de pas k absurd de mare)."""
