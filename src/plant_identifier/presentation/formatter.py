from typing import Optional

from ..messages import Messages, get_messages
from ..schemas import PlantInfo


def format_plant_details(plant: PlantInfo, messages: Optional[Messages] = None) -> str:
    """Render a PlantInfo as Markdown for the result view."""
    messages = messages or get_messages()

    badge = messages.healthy_badge if plant.is_healthy else messages.unhealthy_badge
    icon = "✅" if plant.is_healthy else "⚠️"

    lines = [
        f"## 🌿 {plant.common_name}",
        f"**{messages.scientific_name_label}:** *{plant.scientific_name}*",
        "",
        f"**{messages.origin_label}:** {plant.origin}",
        "",
        f"### {messages.description_label}",
        plant.description,
        "",
        f"### {messages.health_label}: {icon} {badge}",
        plant.health_assessment,
        "",
        f"### {messages.care_label}",
    ]

    if plant.care_recommendations:
        lines.extend(
            f"{i}. {tip}" for i, tip in enumerate(plant.care_recommendations, 1)
        )
    else:
        lines.append(messages.no_care_recommendations)

    return "\n".join(lines)
