"""Built-in rule templates.

Every category holds at least three templates so that any two-category
draw can fill a default five-rule game.
"""

from drinking_game.models import Category, DrinkLevel, RuleTemplate


def _rule(text: str, category: Category, weight: float, base_drink: DrinkLevel) -> RuleTemplate:
    return RuleTemplate(text=text, category=category, weight=weight, base_drink=base_drink)


CATALOG: tuple[RuleTemplate, ...] = (
    # Camera
    _rule("Every time {host} mentions a specific camera model", Category.CAMERA, 0.8, DrinkLevel.SIP),
    _rule("When {host} shows the camera's viewfinder", Category.CAMERA, 0.6, DrinkLevel.SIP),
    _rule("If {host} adjusts camera settings on screen", Category.CAMERA, 0.7, DrinkLevel.GULP),
    # Film
    _rule("Every time {host} mentions film stock", Category.FILM, 0.9, DrinkLevel.SIP),
    _rule("When {host} shows film being loaded", Category.FILM, 0.5, DrinkLevel.GULP),
    _rule("If {host} discusses film development", Category.FILM, 0.6, DrinkLevel.PULL),
    # Technique
    _rule("When {host} explains a photography technique", Category.TECHNIQUE, 0.7, DrinkLevel.SIP),
    _rule("If {host} demonstrates manual focus", Category.TECHNIQUE, 0.5, DrinkLevel.GULP),
    _rule("When {host} talks about composition", Category.TECHNIQUE, 0.6, DrinkLevel.SIP),
    # Location
    _rule("Every time {host} mentions a location", Category.LOCATION, 0.8, DrinkLevel.SIP),
    _rule("When {host} shows outdoor shooting", Category.LOCATION, 0.6, DrinkLevel.GULP),
    _rule("If {host} complains about the light or the weather", Category.LOCATION, 0.5, DrinkLevel.SIP),
    # Equipment
    _rule("When {host} mentions any photography equipment", Category.EQUIPMENT, 0.7, DrinkLevel.SIP),
    _rule("If {host} shows a tripod", Category.EQUIPMENT, 0.4, DrinkLevel.GULP),
    _rule("When {host} swaps a lens", Category.EQUIPMENT, 0.5, DrinkLevel.GULP),
    # General
    _rule("Every time {host} says 'film photography'", Category.GENERAL, 0.9, DrinkLevel.SIP),
    _rule("When {host} shows the final photo", Category.GENERAL, 0.8, DrinkLevel.PULL),
    _rule("If {host} mentions the cost of anything", Category.GENERAL, 0.6, DrinkLevel.GULP),
)
