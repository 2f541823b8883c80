from sitecms.extensions import db

def apply_order(items, ordered_ids, order_field="sort_order"):
    """
    Assigns order values 0..N-1 following `ordered_ids`.
    Items not listed keep their current value.
    """
    by_id = {item.id: item for item in items}

    for index, item_id in enumerate(ordered_ids):
        item = by_id.get(item_id)
        if item is not None:
            setattr(item, order_field, index)

    db.session.flush()
