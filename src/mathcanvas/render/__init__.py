"""
The RENDER layer draws parsed directives, the grid and whole frames onto an
abstract 2-D drawing surface. Concrete surfaces (Qt) live in the app layer.
"""
