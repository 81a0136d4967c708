from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class RecruiterDashboard:
    total_listings: int
    active_listings: int
    pending_listings: int
    total_applications: int
