#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Text and URL helpers shared by the renderer."""
