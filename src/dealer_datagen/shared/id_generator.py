"""
Sequential key generation for generated entities.

Keys are a prefix followed by a zero-padded 1-based counter.

Format: {PREFIX}{separator}{seq:0{width}d}

Examples:
    Customer key: CUST000001
    Employee ID: EMP001
    Order number: ORD-00001
"""


class SequentialKeyGenerator:
    """
    Zero-padded sequential key generator.

    Padding is a minimum width, so counters past ``10**width - 1`` grow by
    one digit instead of wrapping. Keys from one generator are therefore
    unique for any count.

    Attributes:
        prefix: Entity type identifier (e.g., "CUST", "DEAL")
        width: Minimum width of the zero-padded counter
        separator: Text placed between prefix and counter
    """

    def __init__(self, prefix: str, width: int = 6, separator: str = "") -> None:
        """
        Initialize the key generator.

        Args:
            prefix: Entity type prefix (e.g., "CUST", "RO")
            width: Minimum counter width (default: 6)
            separator: Optional separator between prefix and counter

        Raises:
            ValueError: If prefix is empty or width is less than 1
        """
        if not prefix:
            raise ValueError("Prefix cannot be empty")
        if width < 1:
            raise ValueError("width must be >= 1")

        self.prefix = prefix
        self.width = width
        self.separator = separator

    def format(self, sequence: int) -> str:
        """
        Format a key for a 1-based sequence number.

        Examples:
            >>> SequentialKeyGenerator("CUST").format(1)
            'CUST000001'
            >>> SequentialKeyGenerator("ORD", width=5, separator="-").format(42)
            'ORD-00042'
        """
        if sequence < 1:
            raise ValueError(f"sequence must be >= 1, got {sequence}")
        return f"{self.prefix}{self.separator}{sequence:0{self.width}d}"

    def generate(self, count: int) -> list[str]:
        """Return the first ``count`` keys in order."""
        return [self.format(i) for i in range(1, count + 1)]
