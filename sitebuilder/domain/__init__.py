"""
Domain layer: block schemas, constants, errors.

No I/O here; everything else depends on this package.
"""
