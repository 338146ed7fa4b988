"""Human readable durations for the solver logs and the CLI summary."""


def format_duration(seconds):
    if seconds >= 60: return f"{int(seconds//60)} min {seconds%60:.2f} s"
    if seconds >= 1: return f"{seconds:.3f} s"
    return f"{seconds*1000:.2f} ms"
