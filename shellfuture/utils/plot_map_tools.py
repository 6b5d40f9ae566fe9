import matplotlib.patches as mpatches
import cartopy.crs as ccrs


def add_north(ax, labelsize=12, loc_x=0.95, loc_y=0.95, width=0.04, height=0.13, pad=0.14):
    """
    Add a north arrow to a map.

    Parameters:
    ax : cartopy.mpl.geoaxes.GeoAxes
        The axes to which the north arrow will be added.
    labelsize : int, optional
        The font size of the 'N' label. Default is 12.
    loc_x : float, optional
        The x-location of the arrow's base as a fraction of the axes width. Default is 0.95.
    loc_y : float, optional
        The y-location of the arrow's base as a fraction of the axes height. Default is 0.95.
    width : float, optional
        The width of the arrow as a fraction of the axes width. Default is 0.04.
    height : float, optional
        The height of the arrow as a fraction of the axes height. Default is 0.13.
    pad : float, optional
        The padding between the arrow and the 'N' label as a fraction of the axes height. Default is 0.14.

    Returns:
    None
    """
    # Work in axes fraction so the arrow does not depend on the map extent
    left = [loc_x - width * 0.5, loc_y - pad]
    right = [loc_x + width * 0.5, loc_y - pad]
    top = [loc_x, loc_y - pad + height]
    center = [loc_x, left[1] + (top[1] - left[1]) * 0.4]

    triangle = mpatches.Polygon([left, top, right, center], color='k',
                                transform=ax.transAxes, zorder=5)
    ax.add_patch(triangle)

    ax.text(s='N',
            x=loc_x,
            y=loc_y - pad + height,
            fontsize=labelsize,
            transform=ax.transAxes,
            horizontalalignment='center',
            verticalalignment='bottom')


def add_gridlines(ax, color='#ebebeb', linewidth=0.2, labelsize=8):
    """Draw lon/lat gridlines with labels on the bottom and left edges only."""
    gl = ax.gridlines(crs=ccrs.PlateCarree(), draw_labels=True,
                      color=color, linewidth=linewidth, zorder=0)
    gl.top_labels = False
    gl.right_labels = False
    gl.xlabel_style = {'size': labelsize}
    gl.ylabel_style = {'size': labelsize}
    return gl


def add_category_legend(ax, colours, labels, title, edgecolor='black', linewidth=0.4):
    """Legend below the axes with one filled patch per label, in the given order."""
    handles = [
        mpatches.Patch(facecolor=colours[label], edgecolor=edgecolor,
                       linewidth=linewidth, label=label)
        for label in labels
    ]
    return ax.legend(handles=handles,
                     title=title,
                     loc='upper center',
                     bbox_to_anchor=(0.5, -0.1),
                     ncol=len(handles),
                     frameon=False)
