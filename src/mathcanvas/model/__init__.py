"""
The MODEL layer contains pure data structures and the parsing/sampling logic.
It has NO knowledge of the GUI (Qt) or of the drawing surface.
It deals with directives, styles, expressions, curves and the camera.
"""
