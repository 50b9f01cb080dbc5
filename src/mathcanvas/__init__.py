"""Interactive 2-D viewer for curves described by inline `@{...}` directives."""
