"""
Main entrypoint for the geo tools demonstration.

Usage:
    Run directly (`python main.py`) to look up a country name, geocode two addresses
    and print the distance between them. Serve the API with `uvicorn src.api.app:app`.
"""
from src.geo.countries import lookup_country_name
from src.geo.distance import distance_km
from src.geocoding.google import get_coordinates_from_address
from src.logging_setup import configure_logging

def main():
    """
    Main function to run the demonstration.
    """
    configure_logging()

    try:
        print(lookup_country_name("us"))

        address = "NTU, Singapore"
        coordinate = get_coordinates_from_address(address)
        address2 = "NUS, Singapore"
        coordinate2 = get_coordinates_from_address(address2)

        if coordinate is None or coordinate2 is None:
            print("Could not geocode both addresses")
            return 1

        print(f"{address} is at ({coordinate.latitude}, {coordinate.longitude})")
        print(f"{address2} is at ({coordinate2.latitude}, {coordinate2.longitude})")

        distance = distance_km(coordinate.latitude, coordinate.longitude, coordinate2.latitude, coordinate2.longitude)
        print(f"{address} is {distance:.3f} km away from {address2}")

        return 0
    except Exception as e:
        print(f"An error occurred in the main function: {str(e)}")
        return 1


if __name__ == "__main__":
    exit_code = main()
    print(f"Exiting with code {exit_code}")
