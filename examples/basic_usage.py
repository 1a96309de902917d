"""Basic chromansi usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromansi import (
    ColorRGB,
    blend,
    complement,
    emit_gradient,
    emit_hex,
    emit_hsl,
    emit_palette_color,
    emit_true_color,
    red,
)


def demonstrate_colors() -> None:
    # Construct colors and move between RGB, HSL and hex.
    accent = ColorRGB((255, 128, 64))
    print("RGB -> HSL:", accent.to_hsl().value)
    print("RGB -> hex:", accent.to_hex())
    print("complement:", complement(accent).to_hex())
    print("halfway to blue:", blend(accent, (0, 0, 255), 0.5).to_hex())


def demonstrate_terminal() -> None:
    print(red("This is red text"))
    emit_palette_color(10, "This is palette green\n")
    emit_hex("#0000ff", "This is {} text\n", "blue")
    emit_true_color(ColorRGB((255, 255, 0)), "This is yellow text\n")
    emit_hsl((280.0, 0.8, 0.6), "This is violet text\n")
    emit_gradient(["#ff0000", "#00ff00", "#0000ff"], "Gradient across {} stops\n", 3)


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_terminal()
