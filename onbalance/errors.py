class BadBar(ValueError):
    """Bar does not satisfy the input contract of an indicator, such as a negative volume. The
    bar is rejected before any indicator state is changed."""

    pass
