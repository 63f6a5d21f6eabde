#!/usr/bin/env python3
"""
Demo: move one small dataset through every representation.

CSV -> array -> JSON / YAML / objects / XML -> back to CSV
"""

from dataconv import DataConverter


CSV_TEXT = """name;city;note
Al;Gent;"likes ""quotes""\"
Bo;Liège;plain
"""


def main():
    converter = DataConverter()
    converter.csv_data = CSV_TEXT

    print("=" * 80)
    print(f"DATA CONVERTER DEMO (version {DataConverter.version()})")
    print("=" * 80)

    print("\n1. CSV -> ARRAY")
    converter.csv_to_array()
    print(f"   {converter.array_data}")

    print("\n2. ARRAY -> JSON")
    converter.array_to_json(pretty=True)
    print(converter.json_data)

    print("\n3. ARRAY -> YAML")
    converter.array_to_yaml()
    print(converter.yaml_data)

    print("4. ARRAY -> OBJECTS")
    converter.array_to_object()
    for person in converter.object_data:
        print(f"   {person.name} lives in {person.city}")

    print("\n5. ARRAY -> XML")
    converter.array_to_xml(root_node="people", prev_key="person", pretty=True)
    print(converter.xml_data)

    print("6. XML -> CSV")
    converter.xml_to_csv()
    print(converter.csv_data)

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
