"""ERA 樓層導覽目錄管理後端"""
