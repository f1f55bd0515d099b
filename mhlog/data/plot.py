from logging import getLogger

import numpy as np
from matplotlib import pyplot as plt

from .names import MIN_STRESS, MAX_STRESS

log = getLogger(__name__)

LINE = 'darkblue'
REFERENCE = 'red'
GRID = 'lightgray'


def weekly_stress_plot(weekly, overall):
    '''
    Average stress per week as a line with points, against a fixed stress axis, with a
    dashed reference line at the overall average.  Returns the figure.
    '''
    x = np.arange(1, len(weekly) + 1)
    fig = plt.figure(figsize=(8, 5))
    ax = fig.add_subplot(1, 1, 1)
    ax.plot(x, weekly.values, color=LINE, marker='o', linewidth=2)
    ax.set_ylim(MIN_STRESS, MAX_STRESS)
    ax.set_xticks(x)
    ax.set_xticklabels(weekly.index, rotation=90, fontsize='small')
    ax.set_title('Weekly Mental State Trend (Average Stress Level)')
    ax.set_xlabel('Week')
    ax.set_ylabel(f'Average Stress Level ({MIN_STRESS}=Low, {MAX_STRESS}=High)')
    ax.axhline(overall, color=REFERENCE, linestyle='--')
    ax.text(1, overall, f'Overall Avg: {round(overall, 2)}', color=REFERENCE, fontsize='small',
            horizontalalignment='center', verticalalignment='bottom')
    ax.grid(axis='y', color=GRID, linestyle=':')
    fig.tight_layout()
    return fig


def show_or_save(fig, output=None):
    if output:
        fig.savefig(output)
        log.info(f'Wrote plot to {output}')
    else:
        plt.show()
    plt.close(fig)
