"""Built-in topics written to the cache on first run."""

from __future__ import annotations

from iquiz.core.models import Question, Topic, TopicEntry, TopicSet


def default_topic_set() -> TopicSet:
    return (
        TopicEntry(
            topic=Topic(
                title="Mathematics",
                description="Test your math knowledge with algebra, geometry, and more",
                icon_key="function",
            ),
            questions=(
                Question("What is 15% of 200?", ("25", "30", "35", "40"), 1),
                Question("What is the next prime number after 7?", ("9", "10", "11", "13"), 2),
                Question("What is the value of 2^3?", ("6", "8", "9", "12"), 1),
            ),
        ),
        TopicEntry(
            topic=Topic(
                title="Marvel Super Heroes",
                description="How well do you know your favorite Marvel characters?",
                icon_key="bolt.fill",
            ),
            questions=(
                Question(
                    "What is the name of Thor's hammer?",
                    ("Stormbreaker", "Gungnir", "Mjolnir", "Aegis"),
                    2,
                ),
                Question(
                    "Which Marvel character turns green when angry?",
                    ("Hawkeye", "Hulk", "Wolverine", "Cyclops"),
                    1,
                ),
                Question(
                    "Which superhero is from Wakanda?",
                    ("Black Panther", "Doctor Strange", "Iron Fist", "Falcon"),
                    0,
                ),
            ),
        ),
        TopicEntry(
            topic=Topic(
                title="Science",
                description="Challenge yourself with questions about physics, chemistry, and biology",
                icon_key="atom",
            ),
            questions=(
                Question(
                    "What gas do plants absorb from the atmosphere?",
                    ("Oxygen", "Carbon Dioxide", "Nitrogen", "Helium"),
                    1,
                ),
                Question(
                    "What part of the cell contains genetic material?",
                    ("Cytoplasm", "Ribosome", "Nucleus", "Mitochondria"),
                    2,
                ),
                Question(
                    "At what temperature does water boil at sea level (in Celsius)?",
                    ("90°C", "95°C", "100°C", "105°C"),
                    2,
                ),
            ),
        ),
    )
