"""Basic usage example for tablednd with the headless host."""

from tablednd import HeadlessHost, PointerEvent, Table, TableDnDService
from tablednd.logging_config import configure_logging


def main():
    """Drag a row down, nest it, and print the resulting order."""
    configure_logging("DEBUG")

    host = HeadlessHost(row_height=20)
    service = TableDnDService(host)

    table = Table.from_ids("tasks", ["task-1", "task-2", "task-3", "task-4"])

    def on_drop(table, row):
        print(f"Dropped {row.id}; new order: {service.serialize(table)}")

    service.build(table, hierarchy_level=2, on_drop=on_drop)

    # Grab task-2 (top edge at y=20) 5px below its top edge
    row = table.get_row("task-2")
    host.press(table, row, PointerEvent(type="mousedown", page_x=50, page_y=25))

    # Drag down over task-3, then right to nest task-2 under it
    host.move(PointerEvent(page_x=50, page_y=47))
    host.move(PointerEvent(page_x=70, page_y=45))
    host.release(PointerEvent(type="mouseup", page_x=70, page_y=45))

    print(f"Rows: {list(zip(table.order_ids(), table.levels()))}")
    print(f"Data: {service.table_data(table)}")
    print(f"JSON: {service.jsonize(pretty=True, table=table)}")


if __name__ == "__main__":
    main()
