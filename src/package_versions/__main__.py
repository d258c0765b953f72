from package_versions.cli import main

raise SystemExit(main())
