"""Values of the infinite number spiral."""


def spiral_value(row: int, col: int) -> int:
    """Return the number at ``(row, col)`` of the number spiral (1-based).

    Layer ``n`` holds the numbers ``(n-1)**2 + 1`` to ``n**2``. Even layers
    go down the last column and then left along the last row. Odd layers
    go the other way.
    """
    if row < 1 or col < 1:
        raise ValueError("row and column must be positive")
    layer = max(row, col)
    first = (layer - 1) * (layer - 1) + 1
    last = layer * layer
    if layer % 2 == 1:
        row, col = col, row
    if col == layer:
        return first + (row - 1)
    return last - (col - 1)