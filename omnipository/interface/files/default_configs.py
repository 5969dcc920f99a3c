"""
    Just a DEFAULTS dictionary with the parameters of the shell. The Omnipository
    shell merges any user supplied config on top of it, so only the keys
    that change need to be given.
"""
from easydict import EasyDict


DEFAULTS = EasyDict({
    "physics" : {
        "threshold": 240.,  # Visual diameter of a sphere, plus a small margin
        "strength": 0.05,   # Fraction of the overlap resolved per tick
    },
    "spring" : {
        "stiffness": 50.,
        "damping": 25.,
        "overview_scale": 0.6,
        "detail_scale": 1.2,
    },
    "sphere_radius": 112.,
    "clear_on_back": True,
    "spheres" : [
        {"id": "s1", "position": (-150., -100.), "theme": "Organization"},
        {"id": "s2", "position": (180., 20.), "theme": "Systems"},
        {"id": "s3", "position": (-20., 150.), "theme": "Terminology"},
    ],
    "themes" : [
        {
            "id": "Organization",
            "title": "Organization",
            "palette": {
                "background": (167, 243, 208),  # emerald
                "shadow_color": (16, 185, 129, 102),
                "text_color": (2, 44, 34),
            },
        },
        {
            "id": "Systems",
            "title": "Systems",
            "palette": {
                "background": (254, 205, 211),  # ruby
                "shadow_color": (225, 29, 72, 102),
                "text_color": (76, 5, 25),
            },
        },
        {
            "id": "Terminology",
            "title": "Terminology",
            "palette": {
                "background": (253, 230, 138),  # amber
                "shadow_color": (245, 158, 11, 102),
                "text_color": (69, 26, 3),
            },
        },
    ],
})
