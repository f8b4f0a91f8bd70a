"""Interactive Bézier curve editor built on De Casteljau's construction."""
