"""Tests for team totals, winner selection and the match scorer."""

from fcl.aggregation import aggregate_teams, calculate_team_total, rank_teams
from fcl.models import BallEvent, PlayerScore, TeamEntry
from fcl.scorer import MatchScorer


def make_team(name, points):
    """Build a scored team entry with 11 players carrying the given points."""
    players = [f'{name} P{i}' for i in range(1, 12)]
    scores = {
        player: PlayerScore(name=player, role='BATTER', total_points=pts)
        for player, pts in zip(players, points)
    }
    return TeamEntry(
        name=name,
        players=players,
        captain=players[0],
        vice_captain=players[1],
        scores=scores,
    )


def spread(total):
    """Split a total across 11 players."""
    return [total - 10 * 5.0] + [5.0] * 10


class TestTeamTotal:
    """Tests for summing a team entry's player points."""

    def test_sum_of_players(self):
        """Test total is the sum of the 11 players' points."""
        team = make_team('Alpha', [10.0, 20.0, 1.5] + [0.0] * 8)
        assert calculate_team_total(team) == 31.5

    def test_unscored_player_counts_zero(self):
        """Test a player without an attached score contributes 0."""
        team = make_team('Alpha', [10.0] * 11)
        del team.scores[team.players[3]]
        assert calculate_team_total(team) == 100.0


class TestAggregateTeams:
    """Tests for winner selection."""

    def test_tied_winners(self):
        """Test totals 120, 120, 100: both 120 teams win."""
        teams = [make_team('A', spread(120)), make_team('B', spread(120)), make_team('C', spread(100))]
        result = aggregate_teams(teams)

        assert [t.total_points for t in result.teams] == [120.0, 120.0, 100.0]
        assert [t.name for t in result.winners] == ['A', 'B']
        assert result.top_score == 120.0

    def test_single_winner(self):
        """Test the highest total wins alone."""
        teams = [make_team('A', spread(90)), make_team('B', spread(150.5))]
        result = aggregate_teams(teams)
        assert [t.name for t in result.winners] == ['B']
        assert result.has_winner

    def test_no_team_above_winners(self):
        """Test winners share the max and no other team exceeds it."""
        teams = [make_team(f'T{i}', spread(50 + (i * 37) % 11)) for i in range(8)]
        result = aggregate_teams(teams)

        winner_totals = {t.total_points for t in result.winners}
        assert len(winner_totals) == 1
        assert all(t.total_points <= result.top_score for t in result.teams)

    def test_empty_team_set(self):
        """Test no teams: no winners and no top score, without raising."""
        result = aggregate_teams([])
        assert result.teams == []
        assert result.winners == []
        assert result.top_score is None
        assert not result.has_winner

    def test_inputs_not_mutated(self):
        """Test aggregation returns new entries and leaves inputs alone."""
        team = make_team('A', spread(100))
        result = aggregate_teams([team])
        assert team.total_points is None
        assert result.teams[0].total_points == 100.0
        assert result.teams[0] is not team


class TestRankTeams:
    """Tests for standings order."""

    def test_ties_share_rank(self):
        """Test tied totals share a rank and the next rank skips."""
        result = aggregate_teams(
            [make_team('A', spread(80)), make_team('B', spread(120)), make_team('C', spread(120))]
        )
        ranked = [(rank, team.name) for rank, team in rank_teams(result.teams)]
        assert ranked == [(1, 'B'), (1, 'C'), (3, 'A')]


class TestMatchScorer:
    """Tests for scoring whole team entries against a match."""

    def setup_method(self):
        self.events = [
            BallEvent(batter='Bat1', bowler='Bowl1', batsman_run=6, total_run=6),
            BallEvent(batter='Bat2', bowler='Bowl1', batsman_run=0, total_run=0,
                      is_wicket_delivery=True, kind='caught', player_out='Bat2',
                      fielders_involved='Keeper1'),
        ]
        self.players = ['Bat1', 'Bat2', 'Bowl1', 'Keeper1'] + [f'Bench{i}' for i in range(7)]

    def test_score_team_entry(self):
        """Test every player gets a score and the input entry is not modified."""
        team = TeamEntry(name='Alpha', players=self.players, captain='Bat1', vice_captain='Bowl1')
        scored = MatchScorer(self.events).score_team_entry(team)

        assert team.scores == {}
        assert set(scored.scores) == set(self.players)
        assert scored.player_points['Bat1'] == 16.0  # (6 + 2) x 2
        assert scored.player_points['Bat2'] == -2.0
        assert scored.player_points['Bowl1'] == 55.5  # (25 + 12) x 1.5
        assert scored.player_points['Keeper1'] == 8.0
        assert scored.player_points['Bench0'] == 0.0
        assert scored.scores['Bat1'].is_captain
        assert scored.scores['Bowl1'].is_vice_captain

    def test_found_in_events(self):
        """Test players who took part are flagged; bench players are not."""
        scorer = MatchScorer(self.events)
        assert scorer.score_player('Keeper1', 'X', 'Y').found_in_events
        assert not scorer.score_player('Bench0', 'X', 'Y').found_in_events

    def test_unknown_player_scores_with_note(self):
        """Test a player missing from the catalog still scores, with a data note."""
        scorer = MatchScorer(self.events, player_catalog={'Bat1': 'BATTER'})
        known = scorer.score_player('Bat1', 'X', 'Y')
        unknown = scorer.score_player('Keeper1', 'X', 'Y')

        assert known.role == 'BATTER'
        assert known.data_notes == []
        assert unknown.role == 'UNKNOWN'
        assert unknown.total_points == 8.0
        assert 'not found in player catalog' in unknown.data_notes[0]

    def test_score_teams_picks_winner(self):
        """Test score_teams aggregates and returns the winner."""
        alpha = TeamEntry(name='Alpha', players=self.players, captain='Bat1', vice_captain='Bowl1')
        beta = TeamEntry(name='Beta', players=self.players, captain='Bowl1', vice_captain='Bat1')
        result = MatchScorer(self.events).score_teams([alpha, beta])

        # Alpha: 16 - 2 + 55.5 + 8; Beta: 12 - 2 + 74 + 8
        assert [t.total_points for t in result.teams] == [77.5, 92.0]
        assert [t.name for t in result.winners] == ['Beta']

    def test_empty_events_all_teams_tie(self):
        """Test with no deliveries every team totals 0 and all tie as winners."""
        alpha = TeamEntry(name='Alpha', players=self.players, captain='Bat1', vice_captain='Bowl1')
        beta = TeamEntry(name='Beta', players=self.players, captain='Bowl1', vice_captain='Bat1')
        result = MatchScorer([]).score_teams([alpha, beta])

        assert [t.total_points for t in result.teams] == [0.0, 0.0]
        assert [t.name for t in result.winners] == ['Alpha', 'Beta']

    def test_custom_multipliers(self):
        """Test configured multipliers are applied to the team entry."""
        team = TeamEntry(name='Alpha', players=self.players, captain='Bat1', vice_captain='Bowl1')
        scorer = MatchScorer(self.events, captain_multiplier=3.0, vice_captain_multiplier=1.0)
        scored = scorer.score_team_entry(team)
        assert scored.player_points['Bat1'] == 24.0
        assert scored.player_points['Bowl1'] == 37.0
