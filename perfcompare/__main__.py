from perfcompare.cli import main

main(prog_name="perfcompare")
