"""
Fantasy Quest Campaign.

The built-in campaign: a journey from the village to the Murky Mountain,
through sixteen encounters, ending in a battle with the Dragon.
"""

from __future__ import annotations

from src.models.campaign import Campaign
from src.models.combatant import create_enemy
from src.models.scenario import BattleScenario, ChoiceScenario

TITLE = "Fantasy Quest"

INTRODUCTION = (
    "You belong to a small village where a dragon wreaks havoc every once in a while.",
    "You have decided to set out on a journey to kill the dragon once and for all.",
    "But the journey is not easy, it is said that the ones who went out in the past "
    "to kill the dragon have never returned.",
    "There are mountains to climb and rivers to cross, deep forests to surpass "
    "and many vile creatures to fight.",
    "However, you as the brave adventurer embark on this journey to become the hero "
    "of your village.",
    "Gathering all the supplies and weapons you might be needing, you set towards "
    "the Murky Mountain, home to the beast you are set to kill.",
)

EPILOGUE = (
    "Congratulations! You have completed your quest and defeated the dragon!",
    "You return back home and break the news to the villagers.",
    "Listening to this everyone is overwhelmed with joy.",
    "You look back at the Murky Mountain, with pride in your eyes that you have "
    "finished it once and for all.",
    "The village and its inhabitants set to live happily ever after.",
    "**********THE END**********",
)


def _choice(
    description: str,
    options: list[tuple[str, int, str]],
) -> ChoiceScenario:
    """Build a choice scenario from (choice, outcome, result) rows."""
    choices, outcomes, results = zip(*options)
    return ChoiceScenario(
        description=description,
        choices=choices,
        outcomes=outcomes,
        results=results,
    )


def _battle(name: str, health: int, attack_power: int) -> BattleScenario:
    return BattleScenario(enemy=create_enemy(name, health, attack_power))


def create_fantasy_quest_campaign() -> Campaign:
    """
    Create the Fantasy Quest campaign.

    Returns:
        A fresh Campaign with no player assigned
    """
    scenarios = [
        _choice(
            "Soon into the journey, you find a fork in the road.\n"
            "The left path looks calm and safe but is a longer path to the Murky Mountain.\n"
            "The right path looks dangerous but takes you straight to the Murky Mountain.",
            [
                (
                    "Take the left path",
                    -10,
                    "You chose the left path and added more distance to the journey. "
                    "This will cost you in terms of health eventually.",
                ),
                (
                    "Take the right path",
                    0,
                    "The right path looks a bit dangerous, but you still decide to take it "
                    "as it will help you reach there quickly.",
                ),
            ],
        ),
        _battle("Goblin", 30, 10),
        _choice(
            "You continue on your journey after killing the goblin and come across "
            "a suspicious looking chest.",
            [
                ("Open the chest", 20, "You find a potion inside and your health increases."),
                ("Ignore the chest", 0, "You missed out on a useful item and regret it."),
            ],
        ),
        _choice(
            "After passing the chest, you encounter a wise old man who offers you advice.",
            [
                (
                    "Listen to the advice",
                    0,
                    "The old man advises you to avoid the cave ahead. This might be useful later.",
                ),
                (
                    "Ignore the old man and save your time",
                    0,
                    "You ignore the old man and continue on your journey.",
                ),
            ],
        ),
        _choice(
            "Soon afterwards you come across a rickety bridge over a ravine. You can either "
            "cross it while taking the risk or look for some other way around which will "
            "cost you time.",
            [
                (
                    "Cross the bridge",
                    -15,
                    "The bridge collapses and you fall down in a ravine. You end up climbing "
                    "back but lose some of your health.",
                ),
                (
                    "Find another way around",
                    0,
                    "You decide to find another way around, avoiding potential danger.",
                ),
            ],
        ),
        _choice(
            "You eventually get through the ravine and discover a cave which seems suitable "
            "to spend the night and rest to gain back lost health.",
            [
                ("Enter the cave", -10, "You were attacked by bats and lose health."),
                ("Continue on your path", 0, "You continue safely on your journey."),
            ],
        ),
        _choice(
            "Moving on you see a stranger in need of help. You have already short on time "
            "and it is getting dark.",
            [
                (
                    "Help the stranger",
                    20,
                    "The stranger rewards you for your kindness with some food. "
                    "You eat the food and your health increases.",
                ),
                ("Ignore the stranger", 0, "You ignore the stranger and they curse you."),
            ],
        ),
        _choice(
            "It's nearly nightfall and you come across and place suitable for a fire.",
            [
                (
                    "Rest by the fire and spend the night",
                    15,
                    "You wake up the next day feeling rejuvenated. Your health increases.",
                ),
                ("Don't rest and move on quickly", 0, "You move on quickly, avoiding the rest."),
            ],
        ),
        _choice(
            "Continuing on the journey, you find a mysterious amulet on the ground.",
            [
                ("Pick it up", 0, "The amulet does nothing special."),
                (
                    "Leave it",
                    -15,
                    "A curse falls upon you for leaving the amulet. You lose health.",
                ),
            ],
        ),
        _battle("Troll", 50, 15),
        _choice(
            "After the intense encounter with the troll, you carry on the journey and come "
            "across a shortcut that goes through a dark forest.",
            [
                ("Don't take the shortcut", 0, "You decide to take the long route."),
                ("Take the shortcut", 0, "You take the shortcut and continue on the journey."),
            ],
        ),
        _choice(
            "You encounter a river with a strong current. You see some planks near the "
            "river bank as well.",
            [
                ("Swim across the river", -15, "The current is too strong. You lose health."),
                (
                    "Build a raft and then cross the river using it",
                    20,
                    "You successfully build a raft and gain health from the rest.",
                ),
            ],
        ),
        _choice(
            "You find some wild berries along your way. You haven't seen any berries like "
            "these before, hence, you are unsure whether to take them or leave them.",
            [
                ("Eat the berries", 10, "You eat the berries and gain health."),
                ("Ignore the berries", 0, "You ignore the berries and move on."),
            ],
        ),
        _choice(
            "You come across an ancient shrine.",
            [
                (
                    "Pray at the shrine for the betterment of your journey",
                    0,
                    "You feel a strange energy but nothing happens.",
                ),
                ("Ignore the shrine", 0, "You ignore the shrine and move on."),
            ],
        ),
        _choice(
            "Finally you reach the Murky Mountain. Considering how difficult the journey "
            "till now was, you are having second thoughts as to whether you should really "
            "face the dragon or not.",
            [
                ("Turn back now", -1000, "You chose to turn back. What a coward you are."),
                (
                    "Man up and face the dragon",
                    0,
                    "You: Let's show the dragon who's the boss!\n"
                    "Dragon: Who dares awaken me from my slumber?\n"
                    "You: The one destined to end your existence.\n"
                    "Dragon: HaHaHa! That's what those who came before you claimed.\n"
                    "You: No more words. It's time for you to meet your end!",
                ),
            ],
        ),
        _battle("Dragon", 100, 25),
    ]

    return Campaign(
        title=TITLE,
        introduction=INTRODUCTION,
        epilogue=EPILOGUE,
        scenarios=scenarios,
    )
