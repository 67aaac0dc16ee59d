"""Initial schema: source tables and derived stats tables

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

match_status = sa.Enum('scheduled', 'live', 'completed', 'cancelled', name='matchstatus')
coach_role = sa.Enum('head', 'assistant', name='coachrole')


def upgrade() -> None:
    # ==================== Source tables ====================
    op.create_table(
        'seasons',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('year', sa.Integer(), nullable=True),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'teams',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('logo', sa.String(length=500), nullable=True),
        sa.Column('founded_year', sa.Integer(), nullable=True),
        sa.Column('description', sa.String(length=1000), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'players',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('jersey_number', sa.Integer(), nullable=True),
        sa.Column('profile_image_url', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_players_name', 'players', ['name'])

    op.create_table(
        'player_team_history',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('player_id', sa.Integer(), nullable=False),
        sa.Column('team_id', sa.Integer(), nullable=False),
        sa.Column('season_id', sa.Integer(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['player_id'], ['players.id']),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id']),
        sa.ForeignKeyConstraint(['season_id'], ['seasons.id']),
    )
    op.create_index(
        'ix_player_team_history_player_team', 'player_team_history', ['player_id', 'team_id']
    )

    op.create_table(
        'player_positions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('player_id', sa.Integer(), nullable=False),
        sa.Column('season_id', sa.Integer(), nullable=True),
        sa.Column('position', sa.String(length=20), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['player_id'], ['players.id']),
        sa.ForeignKeyConstraint(['season_id'], ['seasons.id']),
    )
    op.create_index('ix_player_positions_player_id', 'player_positions', ['player_id'])

    op.create_table(
        'coaches',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('nationality', sa.String(length=100), nullable=True),
        sa.Column('profile_image_url', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_coaches_name', 'coaches', ['name'])

    op.create_table(
        'team_coach_history',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('coach_id', sa.Integer(), nullable=False),
        sa.Column('team_id', sa.Integer(), nullable=False),
        sa.Column('season_id', sa.Integer(), nullable=True),
        sa.Column('role', coach_role, nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('is_current', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['coach_id'], ['coaches.id']),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id']),
        sa.ForeignKeyConstraint(['season_id'], ['seasons.id']),
    )
    op.create_index('ix_team_coach_history_coach_id', 'team_coach_history', ['coach_id'])

    op.create_table(
        'matches',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('season_id', sa.Integer(), nullable=True),
        sa.Column('home_team_id', sa.Integer(), nullable=True),
        sa.Column('away_team_id', sa.Integer(), nullable=True),
        sa.Column('match_date', sa.Date(), nullable=True),
        sa.Column('home_score', sa.Integer(), nullable=True),
        sa.Column('away_score', sa.Integer(), nullable=True),
        sa.Column('penalty_home_score', sa.Integer(), nullable=True),
        sa.Column('penalty_away_score', sa.Integer(), nullable=True),
        sa.Column('status', match_status, nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['season_id'], ['seasons.id']),
        sa.ForeignKeyConstraint(['home_team_id'], ['teams.id']),
        sa.ForeignKeyConstraint(['away_team_id'], ['teams.id']),
    )
    op.create_index('ix_matches_season_id', 'matches', ['season_id'])
    op.create_index('ix_matches_home_team_id', 'matches', ['home_team_id'])
    op.create_index('ix_matches_away_team_id', 'matches', ['away_team_id'])
    op.create_index('ix_matches_season_status', 'matches', ['season_id', 'status'])

    op.create_table(
        'match_coaches',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('match_id', sa.Integer(), nullable=False),
        sa.Column('coach_id', sa.Integer(), nullable=False),
        sa.Column('team_id', sa.Integer(), nullable=True),
        sa.Column('role', coach_role, nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['match_id'], ['matches.id']),
        sa.ForeignKeyConstraint(['coach_id'], ['coaches.id']),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id']),
    )
    op.create_index('ix_match_coaches_match_id', 'match_coaches', ['match_id'])
    op.create_index('ix_match_coaches_coach_role', 'match_coaches', ['coach_id', 'role'])

    op.create_table(
        'player_match_stats',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('match_id', sa.Integer(), nullable=False),
        sa.Column('player_id', sa.Integer(), nullable=True),
        sa.Column('team_id', sa.Integer(), nullable=True),
        sa.Column('position', sa.String(length=20), nullable=True),
        sa.Column('minutes_played', sa.Integer(), nullable=True),
        sa.Column('goals', sa.Integer(), nullable=True),
        sa.Column('assists', sa.Integer(), nullable=True),
        sa.Column('yellow_cards', sa.Integer(), nullable=True),
        sa.Column('red_cards', sa.Integer(), nullable=True),
        sa.Column('saves', sa.Integer(), nullable=True),
        sa.Column('goals_conceded', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['match_id'], ['matches.id']),
        sa.ForeignKeyConstraint(['player_id'], ['players.id']),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id']),
    )
    op.create_index('ix_player_match_stats_match_id', 'player_match_stats', ['match_id'])
    op.create_index('ix_player_match_stats_player_id', 'player_match_stats', ['player_id'])
    op.create_index('ix_player_match_stats_team_id', 'player_match_stats', ['team_id'])

    # ==================== Derived tables ====================
    op.create_table(
        'standings',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('season_id', sa.Integer(), nullable=False),
        sa.Column('team_id', sa.Integer(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('matches_played', sa.Integer(), nullable=True),
        sa.Column('wins', sa.Integer(), nullable=True),
        sa.Column('draws', sa.Integer(), nullable=True),
        sa.Column('losses', sa.Integer(), nullable=True),
        sa.Column('goals_for', sa.Integer(), nullable=True),
        sa.Column('goals_against', sa.Integer(), nullable=True),
        sa.Column('goal_difference', sa.Integer(), nullable=True),
        sa.Column('points', sa.Integer(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['season_id'], ['seasons.id']),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id']),
        sa.UniqueConstraint('season_id', 'team_id', name='uq_standings_season_team'),
    )
    op.create_index('ix_standings_season_position', 'standings', ['season_id', 'position'])

    op.create_table(
        'team_season_stats',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('season_id', sa.Integer(), nullable=False),
        sa.Column('team_id', sa.Integer(), nullable=False),
        sa.Column('matches_played', sa.Integer(), nullable=True),
        sa.Column('wins', sa.Integer(), nullable=True),
        sa.Column('draws', sa.Integer(), nullable=True),
        sa.Column('losses', sa.Integer(), nullable=True),
        sa.Column('goals_for', sa.Integer(), nullable=True),
        sa.Column('goals_against', sa.Integer(), nullable=True),
        sa.Column('points', sa.Integer(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['season_id'], ['seasons.id']),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id']),
        sa.UniqueConstraint('season_id', 'team_id', name='uq_team_season_stats'),
    )
    op.create_index('ix_team_season_stats_season_id', 'team_season_stats', ['season_id'])
    op.create_index('ix_team_season_stats_team_id', 'team_season_stats', ['team_id'])
    op.create_index('ix_team_season_stats_points', 'team_season_stats', ['points'])

    op.create_table(
        'player_season_stats',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('season_id', sa.Integer(), nullable=False),
        sa.Column('player_id', sa.Integer(), nullable=False),
        sa.Column('team_id', sa.Integer(), nullable=False),
        sa.Column('matches_played', sa.Integer(), nullable=True),
        sa.Column('goals', sa.Integer(), nullable=True),
        sa.Column('assists', sa.Integer(), nullable=True),
        sa.Column('yellow_cards', sa.Integer(), nullable=True),
        sa.Column('red_cards', sa.Integer(), nullable=True),
        sa.Column('minutes_played', sa.Integer(), nullable=True),
        sa.Column('saves', sa.Integer(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['season_id'], ['seasons.id']),
        sa.ForeignKeyConstraint(['player_id'], ['players.id']),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id']),
        sa.UniqueConstraint('season_id', 'player_id', 'team_id', name='uq_player_season_stats'),
    )
    op.create_index('ix_player_season_stats_season_id', 'player_season_stats', ['season_id'])
    op.create_index('ix_player_season_stats_player_id', 'player_season_stats', ['player_id'])
    op.create_index('ix_player_season_stats_team_id', 'player_season_stats', ['team_id'])
    op.create_index('ix_player_season_stats_goals', 'player_season_stats', ['goals'])
    op.create_index('ix_player_season_stats_assists', 'player_season_stats', ['assists'])

    op.create_table(
        'team_seasons',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('season_id', sa.Integer(), nullable=False),
        sa.Column('team_id', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['season_id'], ['seasons.id']),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id']),
        sa.UniqueConstraint('season_id', 'team_id', name='uq_team_seasons'),
    )
    op.create_index('ix_team_seasons_season_id', 'team_seasons', ['season_id'])
    op.create_index('ix_team_seasons_team_id', 'team_seasons', ['team_id'])

    op.create_table(
        'h2h_pair_stats',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('team_small_id', sa.Integer(), nullable=False),
        sa.Column('team_large_id', sa.Integer(), nullable=False),
        sa.Column('total_matches', sa.Integer(), nullable=True),
        sa.Column('small_wins', sa.Integer(), nullable=True),
        sa.Column('large_wins', sa.Integer(), nullable=True),
        sa.Column('draws', sa.Integer(), nullable=True),
        sa.Column('small_goals', sa.Integer(), nullable=True),
        sa.Column('large_goals', sa.Integer(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['team_small_id'], ['teams.id']),
        sa.ForeignKeyConstraint(['team_large_id'], ['teams.id']),
        sa.UniqueConstraint('team_small_id', 'team_large_id', name='uq_h2h_pair'),
        sa.CheckConstraint('team_small_id < team_large_id', name='ck_h2h_pair_order'),
    )


def downgrade() -> None:
    op.drop_table('h2h_pair_stats')
    op.drop_table('team_seasons')
    op.drop_table('player_season_stats')
    op.drop_table('team_season_stats')
    op.drop_table('standings')
    op.drop_table('player_match_stats')
    op.drop_table('match_coaches')
    op.drop_table('matches')
    op.drop_table('team_coach_history')
    op.drop_table('coaches')
    op.drop_table('player_positions')
    op.drop_table('player_team_history')
    op.drop_table('players')
    op.drop_table('teams')
    op.drop_table('seasons')
    match_status.drop(op.get_bind(), checkfirst=True)
    coach_role.drop(op.get_bind(), checkfirst=True)
