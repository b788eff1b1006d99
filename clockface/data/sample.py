"""Built-in demo dataset, expressed as offsets before the reference now."""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo

from clockface.domain.event import ChartEvent, Event
from clockface.loader import build_chart_events

# (name, location, severity, hours_ago, description)
SAMPLE_EVENTS: tuple[tuple[str, str, int, float, str], ...] = (
    ("Stock Market Crash", "New York, USA", 97, 3.2, "Multi-index halt triggered by rapid selloff."),
    ("Regional Conflict Escalation", "Kharkiv, UA", 94, 7.8, "Heavy artillery exchange resumed overnight."),
    ("Pacific Earthquake", "Sendai, JP", 86, 12.4, "Strong quake with extensive transport disruption."),
    ("Subsea Cable Failure", "Lisbon, PT", 54, 18.6, "High-latency outages impacted international traffic."),
    ("Airliner Emergency Landing", "Reykjavík, IS", 41, 20.1, "Flight diverted after avionics anomaly."),
    ("Port Closure Strike", "Rotterdam, NL", 59, 34.2, "Labor action halted major cargo routes."),
    ("Flooding Event", "Dhaka, BD", 65, 48.8, "Rapid inundation displaced thousands."),
    ("Grid Instability", "Johannesburg, ZA", 51, 70.3, "Rolling outages due to generation imbalance."),
    ("Currency Shock", "Buenos Aires, AR", 72, 90.4, "Emergency controls imposed after steep devaluation."),
    ("Wildfire Expansion", "Alberta, CA", 63, 126.7, "Rapid spread prompted extended evacuations."),
    ("Orbital Debris Alert", "LEO", 33, 220.5, "Collision avoidance maneuvers executed."),
    ("Emergency Rate Action", "London, UK", 69, 308.1, "Central bank made unscheduled policy adjustment."),
    ("Bridge Collapse", "Assam, IN", 57, 406.9, "Critical transport link failed during heavy rain."),
    ("Volcanic Ash Reroute", "Iceland", 46, 550.2, "Flight corridors redirected from ash plume."),
    ("Refinery Fire", "Gulf Coast, USA", 61, 680.5, "Fuel production curtailed pending safety review."),
)


def sample_events(now: datetime, zone: tzinfo | None = None) -> list[ChartEvent]:
    """The demo events, timestamped relative to *now*."""
    events = [
        Event(
            id=f"e-{i}",
            name=name,
            location=location,
            severity=severity,
            timestamp=now - timedelta(hours=hours_ago),
            description=description,
        )
        for i, (name, location, severity, hours_ago, description) in enumerate(SAMPLE_EVENTS)
    ]
    return build_chart_events(events, now, zone)
