"""Demo roster for the kiosk.

Five registered voters and the four-candidate ballot shown by the
demonstration kiosk. Real deployments supply their own roster to
``build_booth_kiosk``.
"""

from src.domain.models.voter import Candidate, VoterIdentity

DEMO_VOTERS: tuple[VoterIdentity, ...] = (
    VoterIdentity(id="IND001", display_name="Rajesh Kumar"),
    VoterIdentity(id="IND002", display_name="Priya Sharma"),
    VoterIdentity(id="IND003", display_name="Amit Singh"),
    VoterIdentity(id="IND004", display_name="Sunita Devi"),
    VoterIdentity(id="IND005", display_name="Arjun Patel"),
)

DEMO_CANDIDATES: tuple[Candidate, ...] = (
    Candidate(
        id="BJP001",
        name="Dr. Rajesh Gupta",
        party="Bharatiya Janata Party",
        symbol="🪷",
    ),
    Candidate(
        id="INC001",
        name="Smt. Priya Mehta",
        party="Indian National Congress",
        symbol="✋",
    ),
    Candidate(
        id="AAP001",
        name="Sh. Vikram Singh",
        party="Aam Aadmi Party",
        symbol="🧹",
    ),
    Candidate(
        id="BSP001",
        name="Km. Sunita Devi",
        party="Bahujan Samaj Party",
        symbol="🐘",
    ),
)
