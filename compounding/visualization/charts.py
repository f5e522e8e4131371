"""
Plotly visualizations for projection results.
"""
from typing import Optional

import plotly.graph_objects as go

from compounding.simulation.comparison import DelayComparison, FundVsAccount, RetirementProjection
from compounding.simulation.milestones import Milestone
from compounding.simulation.profiles import Profile
from compounding.simulation.projection import ProjectionResult

INVESTED_COLOR = '#555555'
SAVINGS_COLOR = '#ffb432'
DELAY_COLORS = ['#7cff6b', '#5bc950', '#3a8a30', '#1f5018']


def _rgba(hex_color: str, alpha: float) -> str:
    hex_color = hex_color.lstrip('#')
    r, g, b = (int(hex_color[i:i + 2], 16) for i in (0, 2, 4))
    return f'rgba({r}, {g}, {b}, {alpha})'


def plot_growth(
    result: ProjectionResult,
    profile: Optional[Profile] = None
) -> go.Figure:
    """
    Plot invested capital against total value over time.

    Args:
        result: Projection to plot
        profile: Optional profile, used for color and title

    Returns:
        Plotly figure
    """
    color = profile.color if profile else '#7cff6b'
    df = result.to_dataframe()

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=df['label'],
        y=df['invested'],
        mode='lines',
        name='Innskudd',
        line=dict(color=INVESTED_COLOR, width=2),
        fill='tozeroy',
        fillcolor=_rgba(INVESTED_COLOR, 0.3)
    ))

    fig.add_trace(go.Scatter(
        x=df['label'],
        y=df['total'],
        mode='lines',
        name='Total verdi',
        line=dict(color=color, width=2.5),
        fill='tonexty',
        fillcolor=_rgba(color, 0.25)
    ))

    title = 'Vekst over tid'
    if profile is not None:
        title = f'{profile.label} ({result.annual_rate_percent:.1f}%)'

    fig.update_layout(
        title=title,
        xaxis_title='År',
        yaxis_title='Verdi (kr)',
        yaxis_tickformat=',.0f',
        hovermode='x unified'
    )

    return fig


def plot_delay_cost(comparison: DelayComparison) -> go.Figure:
    """Bar chart of final value per start delay."""
    df = comparison.to_dataframe()
    colors = [DELAY_COLORS[i % len(DELAY_COLORS)] for i in range(len(df))]

    fig = go.Figure(data=[go.Bar(
        x=df['label'],
        y=df['final_total'],
        marker_color=colors,
        text=[f'−{v:,.0f} kr' if v > 0 else '' for v in df['lost_return']],
        textposition='outside'
    )])

    fig.update_layout(
        title='Kostnaden av å vente',
        yaxis_title='Sluttverdi (kr)',
        yaxis_tickformat=',.0f',
        showlegend=False
    )

    return fig


def plot_fund_vs_account(
    comparison: FundVsAccount,
    profile: Optional[Profile] = None
) -> go.Figure:
    """Fund and savings account values side by side."""
    color = profile.color if profile else '#7cff6b'
    df = comparison.to_dataframe()

    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=df['label'],
        y=df['fund'],
        mode='lines',
        name=profile.label if profile else 'Fond',
        line=dict(color=color, width=2.5),
        fill='tozeroy',
        fillcolor=_rgba(color, 0.2)
    ))

    fig.add_trace(go.Scatter(
        x=df['label'],
        y=df['savings'],
        mode='lines',
        name='Sparekonto',
        line=dict(color=SAVINGS_COLOR, width=2),
        fill='tozeroy',
        fillcolor=_rgba(SAVINGS_COLOR, 0.15)
    ))

    fig.add_trace(go.Scatter(
        x=df['label'],
        y=df['invested'],
        mode='lines',
        name='Innskudd',
        line=dict(color=INVESTED_COLOR, width=1, dash='dash')
    ))

    fig.update_layout(
        title=f'Fond vs sparekonto: +{comparison.advantage:,.0f} kr',
        xaxis_title='År',
        yaxis_title='Verdi (kr)',
        yaxis_tickformat=',.0f',
        hovermode='x unified',
        legend=dict(yanchor="top", y=0.99, xanchor="left", x=0.01)
    )

    return fig


def plot_retirement_profiles(retirement: RetirementProjection) -> go.Figure:
    """
    Plot every profile's projection until retirement.

    Args:
        retirement: Projection per profile

    Returns:
        Plotly figure
    """
    df = retirement.to_dataframe()

    fig = go.Figure()

    for profile in retirement.profiles:
        fig.add_trace(go.Scatter(
            x=df['label'],
            y=df[profile.id.value],
            mode='lines',
            name=f'{profile.label} ({profile.annual_rate_percent}%)',
            line=dict(color=profile.color, width=2),
            fill='tozeroy',
            fillcolor=_rgba(profile.color, 0.1)
        ))

    fig.add_trace(go.Scatter(
        x=df['label'],
        y=df['invested'],
        mode='lines',
        name='Innskudd',
        line=dict(color=INVESTED_COLOR, width=2, dash='dash')
    ))

    fig.update_layout(
        title=(
            f'{retirement.horizon_years} år til pensjon · '
            f'alder {retirement.current_age}, pensjon ved {retirement.retirement_age}'
        ),
        xaxis_title='Alder',
        yaxis_title='Verdi (kr)',
        yaxis_tickformat=',.0f',
        hovermode='x unified'
    )

    return fig


def plot_milestones(milestones: list[Milestone]) -> go.Figure:
    """Horizontal bars showing how long each milestone takes."""
    fig = go.Figure(data=[go.Bar(
        x=[m.months_to_reach / 12 for m in milestones],
        y=[f'{m.threshold_amount:,.0f} kr' for m in milestones],
        orientation='h',
        text=[m.label for m in milestones],
        textposition='outside',
        marker_color='#7cff6b'
    )])

    fig.update_layout(
        title='Milepæler',
        xaxis_title='År',
        yaxis=dict(autorange='reversed'),
        showlegend=False
    )

    return fig
