"""Example session: infer axes from notes, place two options and drag one."""

from decision_mapper import DecisionMap, OptionTemplate, print_map
from decision_mapper.geometry import to_canvas

TEXT = """
• money vs time
• remote / in-person
• learning new skills
• job security, runway
"""


def main() -> None:
    decision_map = DecisionMap()
    dims = decision_map.start_from_intake(
        TEXT,
        title="Take the new job?",
        templates=[OptionTemplate(name="Stay"), OptionTemplate(name="Startup offer")],
    )
    money, place = dims[0], dims[1]
    decision_map.set_preference(money.id, 0.4)
    decision_map.set_preference(place.id, 0.7)

    stay, startup = decision_map.options
    decision_map.set_option_score(stay.id, money.id, 0.7)
    decision_map.set_option_score(stay.id, place.id, 0.3)

    decision_map.pointer_down_option(startup.id)
    decision_map.pointer_move(to_canvas((0.45, 0.65), decision_map.frame))
    decision_map.pointer_up()

    print(print_map(decision_map), end="")


if __name__ == "__main__":
    main()
