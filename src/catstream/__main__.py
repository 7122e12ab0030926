from catstream.cli import entry

entry()
