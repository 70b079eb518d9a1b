from .geometry import Point2, Point3


def project(p: Point3) -> Point2:
    # Orthographic: z is dropped. The logical window is calibrated to x/y only.
    return Point2(p.x, p.y)
