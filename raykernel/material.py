from raykernel.math import Tuple, equal
from raykernel.color import Color, BLACK


class Material:
    def __init__(self,
                 color: Color = None,
                 ambient=0.1,
                 diffuse=0.9,
                 specular=0.9,
                 shininess=200.0):
        """
        color: surface color, white when omitted
        ambient: share of the light that is background illumination
        diffuse: Lambertian (matte) reflection coefficient
        specular: Phong highlight coefficient
        shininess: highlight exponent; larger values give a smaller, tighter highlight
        """
        self.color = color if color is not None else Color(1, 1, 1)
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess

    def lighting(self, light: "PointLight", position: Tuple, eye: Tuple, normal: Tuple) -> Color:
        return lighting(self, light, position, eye, normal)

    def __eq__(self, other):
        if not isinstance(other, Material):
            return NotImplemented
        return (self.color == other.color
                and equal(self.ambient, other.ambient)
                and equal(self.diffuse, other.diffuse)
                and equal(self.specular, other.specular)
                and equal(self.shininess, other.shininess))

    __hash__ = None

    def __repr__(self):
        return (f"Material({self.color!r}, ambient={self.ambient}, diffuse={self.diffuse}, "
                f"specular={self.specular}, shininess={self.shininess})")


class PointLight:
    """Light source with no size; intensity does not fall off with distance."""

    def __init__(self, position: Tuple, intensity: Color):
        self.position = position
        self.intensity = intensity

    def __eq__(self, other):
        if not isinstance(other, PointLight):
            return NotImplemented
        return self.position == other.position and self.intensity == other.intensity

    __hash__ = None


def lighting(material: Material, light: PointLight, position: Tuple, eye: Tuple, normal: Tuple) -> Color:
    """Phong shading of one surface point lit by a single point light.

    eye and normal must be unit vectors. The result is not clamped.
    """
    effective_color = material.color * light.intensity
    light_v = (light.position - position).normalize()
    ambient = effective_color * material.ambient

    light_dot_normal = light_v.dot(normal)
    if light_dot_normal < 0:
        # light is on the other side of the surface
        diffuse = BLACK
        specular = BLACK
    else:
        diffuse = effective_color * material.diffuse * light_dot_normal
        reflect_v = (-light_v).reflect(normal)
        reflect_dot_eye = reflect_v.dot(eye)
        if reflect_dot_eye <= 0:
            specular = BLACK
        else:
            factor = reflect_dot_eye ** material.shininess
            specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular
