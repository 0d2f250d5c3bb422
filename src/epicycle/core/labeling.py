"""Connected-component labeling and foreground component selection.

Components are 4-connected. Flood fill is breadth-first over a preallocated
index queue, so large regions never recurse.
"""

from epicycle.config import ComponentConfig
from epicycle.domain import UNLABELED, BinaryMask, ComponentLabeling, LabelField
from epicycle.exceptions import NoForegroundFoundError


def label_components(mask: BinaryMask, inverted: bool = False) -> ComponentLabeling:
    """Label every 4-connected foreground region of a mask.

    Cells are visited in row-major order; each unvisited foreground cell seeds
    a new label. The first component reaching the largest area wins ties.

    Args:
        mask: Binary mask to label
        inverted: Recorded on the result, set when the caller inverted the mask

    Returns:
        ComponentLabeling with the label field and the largest component
    """
    width, height = mask.width, mask.height
    cells = mask.cells
    labels = [UNLABELED] * mask.pixel_count
    queue = [0] * mask.pixel_count

    best_label = UNLABELED
    best_area = 0
    current = 0

    for seed in range(mask.pixel_count):
        if not cells[seed] or labels[seed] != UNLABELED:
            continue

        head, tail = 0, 1
        queue[0] = seed
        labels[seed] = current
        area = 0

        while head < tail:
            idx = queue[head]
            head += 1
            area += 1
            x = idx % width

            for nid, ok in (
                (idx - 1, x > 0),
                (idx + 1, x < width - 1),
                (idx - width, idx >= width),
                (idx + width, idx < width * (height - 1)),
            ):
                if ok and cells[nid] and labels[nid] == UNLABELED:
                    labels[nid] = current
                    queue[tail] = nid
                    tail += 1

        if area > best_area:
            best_area = area
            best_label = current
        current += 1

    return ComponentLabeling(
        field=LabelField(width=width, height=height, labels=tuple(labels)),
        best_label=best_label,
        best_area=best_area,
        label_count=current,
        inverted=inverted,
    )


def select_foreground_component(
    mask: BinaryMask, config: ComponentConfig
) -> ComponentLabeling:
    """Label the mask and pick the component to trace.

    If the largest component still covers more than
    ``component_polarity_fraction`` of the image, the mask is inverted in
    place and labeled once more.

    Args:
        mask: Polarity-corrected mask from binarization
        config: Component selection configuration

    Returns:
        ComponentLabeling whose best component is at least ``min_area``

    Raises:
        NoForegroundFoundError: If no component reaches ``min_area``
    """
    labeling = label_components(mask)

    if labeling.best_area > mask.pixel_count * config.component_polarity_fraction:
        mask.invert()
        labeling = label_components(mask, inverted=True)

    if not labeling.has_component() or labeling.best_area < config.min_area:
        raise NoForegroundFoundError(labeling.best_area, config.min_area)

    return labeling
