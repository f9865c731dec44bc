import time

import medreg


def main() -> None:
    server = medreg.run(port=8080)
    client = server.client()

    client.add("Aspirin", count=10, dosage="500mg")
    client.add("Ibuprofen", count=24, dosage="200mg")
    client.update_count("Aspirin", 5)

    for med in client.list():
        print(f"{med.name}: {med.count} x {med.dosage}")

    try:
        while True:
            time.sleep(3600)
    except KeyboardInterrupt:
        server.stop()


if __name__ == "__main__":
    main()
