from record_scan.main import main

raise SystemExit(main())
