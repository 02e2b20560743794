"""
Homogeneous-coordinate math kernel for a ray tracer.

Packages:
- src.core      : Tuple / Matrix algebra and its contracts
- src.graphics  : Canvas raster surface and PPM output
- src.demo      : projectile demo driver
"""
