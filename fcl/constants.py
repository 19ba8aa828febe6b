"""Constants and point values for FCL fantasy cricket scoring."""

# Player roles in the reference catalog
BATTER = 'BATTER'
WICKETKEEPER = 'WICKETKEEPER'
ALL_ROUNDER = 'ALL-ROUNDER'
BOWLER = 'BOWLER'

ROLES = (BATTER, WICKETKEEPER, ALL_ROUNDER, BOWLER)

UNKNOWN_ROLE = 'UNKNOWN'

# Team composition
TEAM_SIZE = 11

# role -> (min, max) players per team entry
ROLE_LIMITS = {
    BATTER: (1, 8),
    WICKETKEEPER: (1, 8),
    ALL_ROUNDER: (1, 8),
    BOWLER: (1, 8),
}

# Captaincy multipliers
CAPTAIN_MULTIPLIER = 2.0
VICE_CAPTAIN_MULTIPLIER = 1.5

# Dismissal kinds as they appear in the ball-by-ball feed.
# Comparisons are case sensitive: the bowling rules match 'LBW'/'Bowled'
# and exclude 'Run Out', the fielding rules match the lower-case kinds.
KIND_LBW = 'LBW'
KIND_BOWLED = 'Bowled'
BOWLER_DISMISSAL_KINDS = (KIND_LBW, KIND_BOWLED)
PLAYER_OUT_RUN_OUT = 'Run Out'
KIND_CAUGHT = 'caught'
KIND_STUMPED = 'stumped'
KIND_RUN_OUT = 'run out'

# Feed placeholder for "no value"
MISSING_VALUES = ('NA', '')

# Batting points
BOUNDARY_BONUS = 1
SIX_BONUS = 2
DUCK_PENALTY = -2
# (threshold, bonus, breakdown key), checked against the runs of one delivery
RUN_MILESTONES = (
    (30, 4, 'milestone_30'),
    (50, 8, 'milestone_50'),
    (100, 16, 'milestone_100'),
)

# Bowling points
WICKET_POINTS = 25
LBW_BOWLED_BONUS = 8
# 3, 4 and 5 wicket bonuses
WICKET_HAUL_BONUSES = (8, 8, 8)
MAIDEN_POINTS = 12

# Fielding points
CATCH_POINTS = 8
THREE_CATCH_BONUS = 4
STUMPING_POINTS = 12
RUN_OUT_POINTS = 6
