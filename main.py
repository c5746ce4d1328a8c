from oura_status.cli import run

if __name__ == "__main__":
    run()
