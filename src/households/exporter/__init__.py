from households.exporter.json_exporter import index_to_dict, write_json

__all__ = ["index_to_dict", "write_json"]
